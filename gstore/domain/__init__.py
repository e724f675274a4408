"""Domain: value objects and exceptions shared by every layer."""

from gstore.domain.exceptions import ConfigurationError, GStoreException
from gstore.domain.models import Asset, ReadOptions

__all__ = ["Asset", "ConfigurationError", "GStoreException", "ReadOptions"]
