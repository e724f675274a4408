"""Value objects passed in by the host (no dependency on the storage client)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Asset:
    """Uploaded file handed to save(): local source path, display name, content type."""

    path: str
    name: str
    type: str = ""


@dataclass(frozen=True)
class ReadOptions:
    """Input for read(): the remote object path to fetch."""

    path: str
