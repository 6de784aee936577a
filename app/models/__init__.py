"""SQLModel database models."""

from app.models.user import User
from app.models.hydration_entry import HydrationEntry
from app.models.user_goal import UserGoal

__all__ = [
    "User",
    "HydrationEntry",
    "UserGoal",
]
