"""Timestamp utilities."""

from datetime import datetime, timezone


def now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """
    Format a datetime for display.

    Example:
        >>> format_timestamp(datetime(2025, 11, 13, 18, 45, 40))
        '2025-11-13 18:45:40'
    """
    return moment.strftime("%Y-%m-%d %H:%M:%S")
