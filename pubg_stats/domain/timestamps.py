"""Conversions between API timestamp strings and datetimes."""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an API timestamp such as ``2018-04-01T08:35:06Z``; None if empty or invalid."""
    if not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def to_api_timestamp(value: date) -> str:
    """
    Format a date for ``filter[createdAt]``: UTC, millisecond precision, ``Z`` suffix.

    Naive datetimes are taken to be UTC already; plain dates mean midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"
