"""
Column types shared by the models.
"""

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from app.core.time_utils import to_utc


class UTCDateTime(TypeDecorator):
    """``TIMESTAMP WITH TIME ZONE`` that always binds and loads aware UTC values.

    Backends without a time zone type (SQLite) hand back naive values; these
    are read as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return to_utc(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return to_utc(value)
