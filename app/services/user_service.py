"""
User service.

Business logic for user registration and authentication.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.token import TokenData
from app.schemas.user import (LoginRequest, LoginResponse, ProfileResponse, RegisterRequest, RegisterResponse,
                              UserInfo, )

logger = logging.getLogger(__name__)

DUPLICATE_USER_DETAIL = "Username or email already exists"
INVALID_CREDENTIALS_DETAIL = "Invalid credentials"


class UserService:
    """Service for user-related business logic."""

    def __init__(self, repository: UserRepository):
        """
        Initialize service with its user store.

        Args:
            repository: User persistence
        """
        self.repository = repository

    def register(self, user_data: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Args:
            user_data: User registration data

        Returns:
            Confirmation with the new user's id

        Raises:
            HTTPException 400: If username or email already exists
        """
        if self.repository.exists_by_username_or_email(user_data.username, user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_USER_DETAIL)

        user = User(username=user_data.username, email=user_data.email,
                    hashed_password=get_password_hash(user_data.password), )
        try:
            user = self.repository.create(user)
        except IntegrityError:
            # Lost a race against a concurrent registration
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_USER_DETAIL) from None

        logger.info("Registered user %s (%s)", user.username, user.id)
        return RegisterResponse(user_id=str(user.id))

    def authenticate(self, login_data: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return access token.

        Args:
            login_data: User login credentials

        Returns:
            JWT access token and public user info

        Raises:
            HTTPException 401: If credentials are invalid
        """
        user = self.repository.get_by_username(login_data.username)

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.info("Failed login for username %r", login_data.username)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS_DETAIL,
                                headers={ "WWW-Authenticate": "Bearer" }, )

        token = create_access_token(user_id=str(user.id), username=user.username)
        return LoginResponse(token=token, user=UserInfo(id=str(user.id), username=user.username, email=user.email))

    @staticmethod
    def get_profile(identity: TokenData) -> ProfileResponse:
        return ProfileResponse(user_id=identity.user_id, username=identity.username)
