"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.hydration import HydrationRepository

__all__ = [
    "UserRepository",
    "HydrationRepository",
]
