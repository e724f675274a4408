"""Storage adapter contract and the naming capability it depends on."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

from gstore.domain.models import Asset, ReadOptions

Middleware = Callable[[Any, Callable[[Any], Awaitable[Any]]], Awaitable[Any]]


class NamingProtocol(Protocol):
    """Where uploads go: date-bucketed directory and collision-free object name."""

    def get_target_dir(self, base_dir: str | None = None) -> str:
        """Directory for new uploads (e.g. "2024/01")."""
        ...

    async def get_unique_file_name(self, asset: Asset, target_dir: str) -> str:
        """Object path inside target_dir that does not collide with an existing one."""
        ...


class StorageAdapterProtocol(Protocol):
    """Five-method contract the host calls on its active storage adapter."""

    async def save(self, asset: Asset) -> str:
        """Upload asset; return its public URL."""
        ...

    async def exists(self, filename: str, target_dir: str | None = None) -> bool:
        """Return True if the object exists."""
        ...

    async def read(self, options: ReadOptions | Mapping[str, Any]) -> bytes:
        """Return the object's full content."""
        ...

    async def delete(self, filename: str, target_dir: str | None = None) -> bool:
        """Delete the object. Returns True; failures raise."""
        ...

    def serve(self) -> Middleware:
        """HTTP middleware for serving stored files."""
        ...
