"""UTC datetime helpers.

Date-bucketed directories are derived from these so that uploads are filed
under the same year/month regardless of the server's local timezone.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current timezone-aware UTC datetime."""
    return datetime.now(UTC)
