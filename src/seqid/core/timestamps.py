"""
UTC timestamp helpers (stdlib-only).

Generators count whole seconds since an origin. These helpers turn the
different ways callers express a point in time (aware datetimes, naive
datetimes, POSIX numbers, ISO 8601 strings) into whole Unix seconds.

Tags:
    timestamps, unix-time, utc, datetime, seqid-core
"""

from __future__ import annotations

import math
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def unix_seconds(value: datetime | int | float) -> int:
    """Whole Unix seconds for ``value``, rounded toward the past.

    Naive datetimes are interpreted as local time, as ``datetime.timestamp``
    does. ``bool`` is rejected even though it is an ``int``.

    Examples:
        >>> unix_seconds(datetime(2024, 1, 1, tzinfo=UTC))
        1704067200
        >>> unix_seconds(1704067200.9)
        1704067200
    """
    if isinstance(value, bool):
        raise TypeError("unix_seconds() does not accept bool")
    if isinstance(value, datetime):
        return math.floor(value.timestamp())
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return math.floor(value)
    raise TypeError(f"unix_seconds() expects datetime or number, got {type(value).__name__}")


def from_iso8601(s: str | None) -> datetime | None:
    """Parse ISO 8601 string to datetime."""
    if s is None:
        return None
    return datetime.fromisoformat(s)


__all__ = ["utc_now", "unix_seconds", "from_iso8601"]
