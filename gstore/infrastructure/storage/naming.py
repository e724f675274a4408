"""Date-bucketed directories and collision-free file names for uploads."""

from __future__ import annotations

import os
import re
from collections.abc import Awaitable, Callable
from datetime import datetime

from gstore.domain.models import Asset
from gstore.shared.utils.datetime import utc_now

ExistsCheck = Callable[[str, str], Awaitable[bool]]

_UNSAFE_CHARS = re.compile(r"[^\w@.]", re.ASCII)


class DateBucketedNaming:
    """Files uploads under year/month and appends -1, -2, ... on collision.

    The exists callback is the storage adapter's own exists(), so uniqueness
    is checked against the bucket the file is about to be written to.
    """

    def __init__(
        self,
        exists: ExistsCheck,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._exists = exists
        self._clock = clock

    def get_target_dir(self, base_dir: str | None = None) -> str:
        now = self._clock()
        year = now.strftime("%Y")
        month = now.strftime("%m")
        if base_dir:
            return os.path.join(base_dir, year, month)
        return os.path.join(year, month)

    @staticmethod
    def get_sanitized_file_name(file_name: str) -> str:
        """Replace anything other than letters, digits, _, @ and . with '-'."""
        return _UNSAFE_CHARS.sub("-", file_name)

    async def get_unique_file_name(self, asset: Asset, target_dir: str) -> str:
        stem, ext = os.path.splitext(os.path.basename(asset.name))
        name = self.get_sanitized_file_name(stem)
        attempt = 0
        while True:
            suffix = f"-{attempt}" if attempt else ""
            filename = f"{name}{suffix}{ext}"
            if not await self._exists(filename, target_dir):
                return os.path.join(target_dir, filename)
            attempt += 1
