"""Google Cloud Storage adapter for the host storage contract.

Uses google-cloud-storage (sync) via asyncio.to_thread for the async API.
Client errors are not caught or wrapped: whatever the upload, existence
check, download stream or delete raises reaches the caller unchanged.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from google.cloud import storage

from gstore.core.config import GStoreConfig
from gstore.domain.exceptions import ConfigurationError
from gstore.domain.models import Asset, ReadOptions
from gstore.infrastructure.storage.naming import DateBucketedNaming
from gstore.infrastructure.storage.protocol import Middleware, NamingProtocol
from gstore.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DOMAIN_SUFFIX = "storage.googleapis.com"
PUBLIC_READ_ACL = "publicRead"


def normalize_path(file_path: str) -> str:
    """Object paths always use forward slashes, whatever the host OS joins with."""
    return file_path.replace("\\", "/")


class GStore:
    """Storage adapter persisting host assets to one Google Cloud Storage bucket.

    Configuration, bucket handle and base URL are fixed at construction.
    Operations hold no other state, so concurrent calls are independent.
    """

    CHUNK_SIZE = 256 * 1024  # 256KB

    def __init__(
        self,
        config: GStoreConfig | Mapping[str, Any],
        *,
        naming: NamingProtocol | None = None,
        client: storage.Client | None = None,
    ) -> None:
        """Validate configuration and derive the bucket handle and base URL.

        No network I/O happens here.

        Args:
            config: GStoreConfig, or the host's config block as a mapping.
            naming: Target-dir/unique-name capability; defaults to
                DateBucketedNaming checked against this bucket.
            client: Pre-built storage client; built from key/project_id if None.

        Raises:
            ConfigurationError: Bucket missing or empty, or invalid values.
        """
        if not isinstance(config, GStoreConfig):
            config = GStoreConfig.from_mapping(config)
        if not config.bucket:
            raise ConfigurationError(
                "Google Cloud Storage bucket is required", {"field": "bucket"}
            )

        self._config = config
        self._client = client if client is not None else self._build_client(config)
        self._bucket = self._client.bucket(config.bucket)

        self._asset_domain = config.asset_domain or f"{config.bucket}.{DEFAULT_DOMAIN_SUFFIX}"
        self._insecure = config.insecure
        self._max_age = config.max_age
        self._uniform_bucket_level_access = config.uniform_bucket_level_access
        protocol = "http" if self._insecure else "https"
        self._base_url = f"{protocol}://{self._asset_domain}/"

        self._naming: NamingProtocol = naming or DateBucketedNaming(exists=self.exists)
        logger.info(
            "GCS storage adapter ready: bucket=%s base_url=%s",
            config.bucket,
            self._base_url,
        )

    @staticmethod
    def _build_client(config: GStoreConfig) -> storage.Client:
        """Client from a service-account key file if given, else default credentials."""
        if config.key:
            return storage.Client.from_service_account_json(
                config.key, project=config.project_id
            )
        return storage.Client(project=config.project_id)

    @staticmethod
    def _object_path(filename: str, target_dir: str | None = None) -> str:
        """Join with the OS separator first, then normalize to forward slashes."""
        joined = os.path.join(target_dir, filename) if target_dir else filename
        return normalize_path(joined)

    def get_base_url(self) -> str:
        return self._base_url

    def get_config(self) -> GStoreConfig:
        return self._config

    async def save(self, asset: Asset) -> str:
        """Upload asset under a date-bucketed unique name; return its public URL.

        Without uniform bucket-level access the object is uploaded with the
        publicRead ACL; buckets with uniform access reject per-object ACLs, so
        visibility is then left to bucket policy.
        """
        target_dir = self._naming.get_target_dir()
        target_filename = normalize_path(
            await self._naming.get_unique_file_name(asset, target_dir)
        )

        blob = self._bucket.blob(target_filename)
        blob.cache_control = f"public, max-age={self._max_age}"
        upload_kwargs: dict[str, Any] = {}
        if asset.type:
            upload_kwargs["content_type"] = asset.type
        if not self._uniform_bucket_level_access:
            upload_kwargs["predefined_acl"] = PUBLIC_READ_ACL

        logger.debug("Uploading %s to gs://%s/%s", asset.path, self._bucket.name, target_filename)
        await asyncio.to_thread(blob.upload_from_filename, asset.path, **upload_kwargs)
        return self._base_url + target_filename

    async def exists(self, filename: str, target_dir: str | None = None) -> bool:
        file_path = self._object_path(filename, target_dir)
        found = await asyncio.to_thread(self._bucket.blob(file_path).exists)
        return bool(found)

    async def read(self, options: ReadOptions | Mapping[str, Any]) -> bytes:
        """Stream the object and return all chunks concatenated in arrival order.

        options is a ReadOptions or the host's plain {"path": ...} mapping.
        """
        path = options["path"] if isinstance(options, Mapping) else options.path
        blob = self._bucket.blob(path)

        def _read() -> bytes:
            chunks: list[bytes] = []
            with blob.open("rb", chunk_size=self.CHUNK_SIZE) as stream:
                while chunk := stream.read(self.CHUNK_SIZE):
                    chunks.append(chunk)
            return b"".join(chunks)

        return await asyncio.to_thread(_read)

    async def delete(self, filename: str, target_dir: str | None = None) -> bool:
        file_path = self._object_path(filename, target_dir)
        logger.debug("Deleting gs://%s/%s", self._bucket.name, file_path)
        await asyncio.to_thread(self._bucket.blob(file_path).delete)
        return True

    def serve(self) -> Middleware:
        """No-op HTTP middleware: asset URLs are absolute, nothing to rewrite or proxy."""

        async def passthrough(
            request: Any, call_next: Callable[[Any], Awaitable[Any]]
        ) -> Any:
            return await call_next(request)

        return passthrough
