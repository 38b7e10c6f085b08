"""
Domain time utilities (pure).

Centralized timestamp validation and formatting helpers.

Behavior and error messages must remain consistent across the domain model.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Enforces the requirement that timestamps are UTC.

    Invariants:
    - Timestamps must be timezone-aware.
    - Timestamps must have UTC offset 0.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_utc(value: datetime) -> str:
    """
    Format a UTC timestamp as ISO-8601 with millisecond precision and a 'Z'
    suffix, e.g. 2025-01-01T12:00:00.000Z.
    """

    require_utc_timestamp("timestamp", value)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def epoch_millis(value: datetime) -> int:
    """Milliseconds since the Unix epoch for a UTC timestamp."""

    require_utc_timestamp("timestamp", value)
    return (value - _EPOCH) // timedelta(milliseconds=1)
