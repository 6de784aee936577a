"""
Hydration service.

Business logic for logging entries, reading statistics and managing the
per-user daily goal. Persistence is reached only through the injected
:class:`EntryStore`.
"""

import datetime
import logging
import uuid
from typing import Optional, Protocol

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.time_utils import to_utc, utcnow
from app.hydration.stats import compute_stats
from app.hydration.validation import validate_entry, validate_goal
from app.models.hydration_entry import HydrationEntry
from app.schemas.hydration import CreateEntryRequest, HydrationStats, UpdateGoalResponse

logger = logging.getLogger(__name__)


class EntryStore(Protocol):
    """Persistence interface for hydration entries and goals."""

    def list_entries(self, user_id: uuid.UUID) -> list[HydrationEntry]:
        """Return all entries of a user."""

    def insert_entry(self, entry: HydrationEntry) -> HydrationEntry:
        """Persist a new entry."""

    def get_goal(self, user_id: uuid.UUID) -> Optional[int]:
        """Return the user's daily goal, None if unset."""

    def upsert_goal(self, user_id: uuid.UUID, value: int) -> int:
        """Insert or overwrite the user's daily goal atomically."""

    def ensure_goal(self, user_id: uuid.UUID, value: int) -> int:
        """Store ``value`` unless a goal already exists; return the goal in effect."""


class HydrationService:
    """Service for hydration business logic."""

    def __init__(self, store: EntryStore, default_goal: Optional[int] = None):
        self.store = store
        self.default_goal = default_goal if default_goal is not None else settings.DEFAULT_DAILY_GOAL

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def log_entry(self, user_id: uuid.UUID, data: CreateEntryRequest,
                  now: Optional[datetime.datetime] = None, ) -> HydrationEntry:
        """Validate and persist a new intake entry.

        Raises:
            HTTPException 400: If the amount is not positive or the type is empty.
        """
        if not validate_entry(data.amount, data.type):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail="Amount must be positive and type must not be empty")

        timestamp = data.timestamp or now or utcnow()
        entry = HydrationEntry(id=uuid.uuid4(), user_id=user_id, amount=data.amount, type=data.type,
                               timestamp=to_utc(timestamp), )
        return self.store.insert_entry(entry)

    def list_entries(self, user_id: uuid.UUID) -> list[HydrationEntry]:
        return self.store.list_entries(user_id)

    def get_stats(self, user_id: uuid.UUID, now: Optional[datetime.datetime] = None) -> HydrationStats:
        """Compute the user's rolling statistics as of ``now`` (defaults to the current UTC time)."""
        goal = self._get_or_bootstrap_goal(user_id)
        entries = self.store.list_entries(user_id)
        return compute_stats(entries, goal, now or utcnow())

    def update_goal(self, user_id: uuid.UUID, goal: int) -> UpdateGoalResponse:
        """Set the user's daily goal (last write wins).

        Raises:
            HTTPException 400: If the goal is below 1 ml.
        """
        if not validate_goal(goal):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Goal must be at least 1")

        stored = self.store.upsert_goal(user_id, goal)
        logger.info("Daily goal for user %s set to %d", user_id, stored)
        return UpdateGoalResponse(goal=stored)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_bootstrap_goal(self, user_id: uuid.UUID) -> int:
        """Return the stored goal, persisting the default one on first access."""
        goal = self.store.get_goal(user_id)
        if goal is not None:
            return goal

        goal = self.default_goal
        try:
            goal = self.store.ensure_goal(user_id, goal)
            logger.info("Bootstrapped default goal %d for user %s", goal, user_id)
        except SQLAlchemyError:
            # Stats are still served with the default goal
            logger.exception("Failed to create default goal for user %s", user_id)
        return goal
