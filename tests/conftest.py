"""Pytest configuration and fixtures for gstore.

The google-cloud-storage Client class is patched for every test, so no
credential lookup or network call happens. Tests drive the adapter through
the bucket and blob MagicMocks below.
"""

from unittest.mock import MagicMock, patch

import pytest

from gstore.core.config import get_settings
from gstore.domain.models import Asset


class ChunkedStream:
    """Stand-in for a blob reader: yields the given chunks, then EOF or an error."""

    def __init__(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self._chunks = list(chunks)
        self._error = error
        self.closed = False

    def __enter__(self) -> "ChunkedStream":
        return self

    def __exit__(self, *exc_info: object) -> bool:
        self.closed = True
        return False

    def read(self, size: int = -1) -> bytes:
        if self._chunks:
            return self._chunks.pop(0)
        if self._error is not None:
            raise self._error
        return b""


class FixedNaming:
    """Naming capability returning a fixed directory, like the host base class in tests."""

    def __init__(self, target_dir: str = "2024/01") -> None:
        self.target_dir = target_dir

    def get_target_dir(self, base_dir: str | None = None) -> str:
        return self.target_dir

    async def get_unique_file_name(self, asset: Asset, target_dir: str) -> str:
        return f"{target_dir}/{asset.name}"


@pytest.fixture
def blob() -> MagicMock:
    """Blob handle; reports 'not found' unless a test says otherwise."""
    handle = MagicMock(name="blob")
    handle.exists.return_value = False
    return handle


@pytest.fixture
def bucket(blob: MagicMock) -> MagicMock:
    handle = MagicMock(name="bucket")
    handle.name = "test-bucket"
    handle.blob.return_value = blob
    return handle


@pytest.fixture(autouse=True)
def storage_client(bucket: MagicMock):
    """Patched storage.Client class; its instances hand out the bucket mock."""
    with patch("gstore.infrastructure.storage.gcs_storage.storage.Client") as client_cls:
        client = client_cls.return_value
        client.bucket.return_value = bucket
        client_cls.from_service_account_json.return_value = client
        yield client_cls


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; re-read them for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def asset() -> Asset:
    return Asset(path="/tmp/photo.jpg", name="photo.jpg", type="image/jpeg")
