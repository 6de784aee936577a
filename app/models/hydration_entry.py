"""
Hydration entry database model.

One row per logged intake. Rows are never updated or deleted.
"""

import datetime
import uuid

from sqlmodel import Field, SQLModel

from app.core.time_utils import utcnow
from app.db.types import UTCDateTime


class HydrationEntry(SQLModel, table=True):
    """A single intake event: amount (ml), drink type and when it happened (UTC)."""

    __tablename__ = "hydration_entries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", nullable=False, index=True)
    amount: int = Field(nullable=False)
    timestamp: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False, index=True)
    type: str = Field(max_length=50, nullable=False)
