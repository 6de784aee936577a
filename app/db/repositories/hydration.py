"""
Hydration repository.

Handles database operations for HydrationEntry and UserGoal models.
"""

import uuid
from typing import Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, select

from app.core.time_utils import utcnow
from app.models.hydration_entry import HydrationEntry
from app.models.user_goal import UserGoal

# Dialects with INSERT ... ON CONFLICT support
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class HydrationRepository:
    """Repository for hydration entries and per-user daily goals."""

    def __init__(self, session: Session):
        self.session = session

    def list_entries(self, user_id: uuid.UUID) -> list[HydrationEntry]:
        """Get all entries for a user, newest first."""
        statement = (
            select(HydrationEntry)
            .where(HydrationEntry.user_id == user_id)
            .order_by(HydrationEntry.timestamp.desc())
        )
        return list(self.session.exec(statement).all())

    def insert_entry(self, entry: HydrationEntry) -> HydrationEntry:
        self.session.add(entry)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(entry)
        return entry

    def get_goal(self, user_id: uuid.UUID) -> Optional[int]:
        """Get the user's daily goal, None if the user has never set one."""
        goal = self.session.get(UserGoal, user_id)
        return goal.daily_goal if goal else None

    def upsert_goal(self, user_id: uuid.UUID, value: int) -> int:
        """
        Insert or overwrite the user's daily goal in a single statement.

        Args:
            user_id: Owner of the goal
            value: New daily goal in milliliters

        Returns:
            The stored goal
        """
        self._insert_goal(user_id, value, overwrite=True)
        return value

    def ensure_goal(self, user_id: uuid.UUID, value: int) -> int:
        """Insert ``value`` as the user's goal unless one exists; return the goal in effect."""
        self._insert_goal(user_id, value, overwrite=False)
        goal = self.get_goal(user_id)
        return goal if goal is not None else value

    def _insert_goal(self, user_id: uuid.UUID, value: int, overwrite: bool) -> None:
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Goal upsert is not supported on {dialect}")

        now = utcnow()
        statement = insert(UserGoal).values(user_id=user_id, daily_goal=value, created_at=now, updated_at=now)
        if overwrite:
            statement = statement.on_conflict_do_update(
                index_elements=["user_id"],
                set_={"daily_goal": statement.excluded.daily_goal, "updated_at": statement.excluded.updated_at},
            )
        else:
            statement = statement.on_conflict_do_nothing(index_elements=["user_id"])

        try:
            self.session.execute(statement)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        # The identity map may hold a stale copy of the row
        self.session.expire_all()
