"""Core: adapter configuration and application settings."""

from gstore.core.config import (
    DEFAULT_MAX_AGE,
    GStoreConfig,
    Settings,
    get_settings,
    load_host_config,
)

__all__ = [
    "DEFAULT_MAX_AGE",
    "GStoreConfig",
    "Settings",
    "get_settings",
    "load_host_config",
]
