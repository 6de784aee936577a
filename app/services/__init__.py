"""Business logic services."""

from app.services.user_service import UserService
from app.services.hydration_service import EntryStore, HydrationService

__all__ = [
    "UserService",
    "EntryStore",
    "HydrationService",
]
