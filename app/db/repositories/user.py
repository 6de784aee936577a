"""
User repository.

Handles database operations for User model.
"""

import uuid
from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Rolls back the session if the insert fails (e.g. unique violation).

        Args:
            user: User instance to create

        Returns:
            Created user
        """
        self.session.add(user)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Login name

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.username == username)
        return self.session.exec(statement).first()

    def exists_by_username_or_email(self, username: str, email: str) -> bool:
        """
        Check if a user with the given username or email exists.

        Args:
            username: Username to check
            email: Email to check

        Returns:
            True if either is already taken, False otherwise
        """
        statement = select(User).where(or_(User.username == username, User.email == email))
        return self.session.exec(statement).first() is not None
