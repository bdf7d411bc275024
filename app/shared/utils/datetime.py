"""
UTC datetime helpers.

Timestamps in the system are timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime to aware UTC at repository boundaries.

    Naive values are assumed to be UTC already; aware values are converted.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)
