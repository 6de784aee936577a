"""
User database model.

Defines the User table for authentication and user management.
"""

import datetime
import uuid

from sqlmodel import Field, SQLModel

from app.core.time_utils import utcnow
from app.db.types import UTCDateTime


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials; the ``password`` column holds a salted hash.
    """
    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50, nullable=False)
    email: str = Field(unique=True, index=True, max_length=100, nullable=False)
    hashed_password: str = Field(max_length=255, nullable=False, sa_column_kwargs={"name": "password"})

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
