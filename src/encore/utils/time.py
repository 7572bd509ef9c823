"""Time utilities for Encore."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


def utc_timestamp() -> str:
    """Return the current instant as an ISO-8601 string with millisecond precision.

    Example: ``2024-01-15T10:30:00.123Z``
    """
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
