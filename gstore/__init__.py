"""gstore: Google Cloud Storage adapter for Ghost-style asset storage.

The adapter implements the host's five-method storage contract (save, exists,
read, delete, serve) on top of google-cloud-storage.
"""

from gstore.core.config import GStoreConfig
from gstore.domain.exceptions import ConfigurationError, GStoreException
from gstore.domain.models import Asset, ReadOptions
from gstore.infrastructure.storage import GStore, StorageFactory

__all__ = [
    "Asset",
    "ConfigurationError",
    "GStore",
    "GStoreConfig",
    "GStoreException",
    "ReadOptions",
    "StorageFactory",
]
