"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, database access and
service construction.
"""

import uuid
from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.security import bearer_scheme, decode_access_token
from app.db.repositories.hydration import HydrationRepository
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.schemas.token import TokenData
from app.services.hydration_service import HydrationService
from app.services.user_service import UserService


def get_current_user(authorization: Optional[str] = Depends(bearer_scheme)) -> TokenData:
    """Extract and validate the caller's identity from the JWT in the Authorization header."""
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authorization header required",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    identity = decode_access_token(authorization)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return identity


def get_current_user_id(identity: TokenData = Depends(get_current_user)) -> uuid.UUID:
    """The caller's id as a UUID; tokens carrying anything else are rejected."""
    try:
        return uuid.UUID(identity.user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token",
                            headers={ "WWW-Authenticate": "Bearer" }, ) from None


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_hydration_service(db: Session = Depends(get_db)) -> HydrationService:
    return HydrationService(HydrationRepository(db))
