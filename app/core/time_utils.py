"""
Time helpers.

All instants in the system are timezone-aware UTC datetimes.
"""

import datetime


def utcnow() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def to_utc(value: datetime.datetime) -> datetime.datetime:
    """Convert ``value`` to aware UTC; naive inputs are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)
