"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.hydration_entry import HydrationEntry  # noqa: F401
from app.models.user_goal import UserGoal  # noqa: F401
