"""Storage: Google Cloud Storage adapter for the host storage contract.

GStore implements StorageAdapterProtocol (save, exists, read, delete, serve).
Directory and unique-filename decisions are delegated to a NamingProtocol
capability; DateBucketedNaming is the default. StorageFactory builds the
adapter from settings or a host config document.
"""

from gstore.infrastructure.storage.factory import StorageFactory
from gstore.infrastructure.storage.gcs_storage import GStore, normalize_path
from gstore.infrastructure.storage.naming import DateBucketedNaming
from gstore.infrastructure.storage.protocol import (
    NamingProtocol,
    StorageAdapterProtocol,
)

__all__ = [
    "DateBucketedNaming",
    "GStore",
    "NamingProtocol",
    "StorageAdapterProtocol",
    "StorageFactory",
    "normalize_path",
]
