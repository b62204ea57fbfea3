"""
Date and time helpers for gateway payloads.
"""

from datetime import date, datetime
from typing import Optional, Tuple, Union

DateLike = Union[str, date, datetime]


def _parse_iso(value: str) -> datetime:
    value = value.strip()
    # fromisoformat() only accepts a trailing "Z" from 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def split_slot_start(start_time: str) -> Tuple[str, str]:
    """
    Split a slot start timestamp into booking date and time.

    Args:
        start_time: ISO-8601 timestamp, e.g. ``2025-03-10T09:30:00``

    Returns:
        Tuple of (``YYYY-MM-DD``, ``HH:MM:SS``)

    Raises:
        ValueError: if the timestamp cannot be parsed
    """
    parsed = _parse_iso(start_time)
    return parsed.strftime("%Y-%m-%d"), parsed.strftime("%H:%M:%S")


def format_date_param(value: Optional[DateLike]) -> Optional[str]:
    """Format a date bound for a query string; strings pass through."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)
