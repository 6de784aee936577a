"""
Database initialization.

Creates all tables for local development; deployed databases are
managed by the Alembic migrations.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Creates the users, hydration_entries and user_goals tables if missing.

    Args:
        bind: Engine to use (defaults to the application engine)
    """
    # Import all models so SQLModel.metadata has them
    from app.db import base  # noqa: F401

    if bind is None:
        from app.db.session import engine as bind

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    from app.core.app_logging import configure_logging

    configure_logging()
    init_db()
