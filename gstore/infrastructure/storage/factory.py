"""Storage adapter factory: builds GStore from settings or a host config document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from gstore.domain.exceptions import ConfigurationError
from gstore.infrastructure.storage.gcs_storage import GStore
from gstore.infrastructure.storage.protocol import StorageAdapterProtocol

if TYPE_CHECKING:
    from gstore.core.config import Settings


class StorageFactory:
    """Factory for storage adapter instances based on configuration."""

    @staticmethod
    def create_storage_adapter(settings: "Settings | None" = None) -> StorageAdapterProtocol:
        """Create the adapter from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            GStore for the configured bucket.

        Raises:
            ConfigurationError: Missing bucket, unreadable host config, or
                no storage block for the active adapter.
        """
        from gstore.core.config import get_settings, load_host_config

        s = settings or get_settings()
        if s.host_config_path:
            payload = load_host_config(s.host_config_path)
            return StorageFactory.from_host_config(payload, adapter_name=s.adapter_name)
        return GStore(s.to_storage_config())

    @staticmethod
    def from_host_config(
        payload: Mapping[str, Any], adapter_name: str = "gcs"
    ) -> StorageAdapterProtocol:
        """Create the adapter from a Ghost-style config document.

        Accepts the full document ({"storage": {"active": "gcs", "gcs": {...}}})
        or the adapter block on its own.
        """
        storage_section = payload.get("storage")
        if storage_section is None:
            return GStore(payload)
        if not isinstance(storage_section, Mapping):
            raise ConfigurationError(
                "'storage' must be an object", {"field": "storage"}
            )

        active = storage_section.get("active") or adapter_name
        if not isinstance(active, str):
            raise ConfigurationError(
                "'storage.active' must name a single adapter",
                {"field": "storage.active"},
            )
        block = storage_section.get(active)
        if not isinstance(block, Mapping):
            raise ConfigurationError(
                f"No configuration block for storage adapter '{active}'",
                {"field": f"storage.{active}"},
            )
        return GStore(block)
