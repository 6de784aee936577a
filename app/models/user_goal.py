"""
User goal database model.

At most one daily goal per user, keyed by ``user_id``.
"""

import datetime
import uuid

from sqlmodel import Field, SQLModel

from app.core.time_utils import utcnow
from app.db.types import UTCDateTime


class UserGoal(SQLModel, table=True):
    __tablename__ = "user_goals"

    user_id: uuid.UUID = Field(foreign_key="users.id", primary_key=True)
    daily_goal: int = Field(default=2000, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
