"""
Security helpers.

Password hashing and JWT access tokens shared by the auth and
hydration services.
"""

import datetime
import logging
from typing import Optional

import jwt
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext

from app.core.config import settings
from app.schemas.token import TokenData

logger = logging.getLogger(__name__)

# pbkdf2_sha256 is pure python and needs no external backend
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Raw header so that both "Bearer <token>" and a bare token are accepted
bearer_scheme = APIKeyHeader(name="Authorization", scheme_name="BearerAuth", auto_error=False)

BEARER_PREFIX = "Bearer "


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: str, username: str,
                        expires_delta: Optional[datetime.timedelta] = None) -> str:
    """
    Issue a signed access token.

    Args:
        user_id: Identifier of the authenticated user
        username: Username of the authenticated user
        expires_delta: Token lifetime (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT (header.payload.signature)
    """
    issued_at = datetime.datetime.now(datetime.timezone.utc)
    lifetime = expires_delta or datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "user_id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenData]:
    """
    Validate a token and extract the identity it carries.

    Returns:
        TokenData if the signature and expiry are valid, None otherwise
    """
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM],
                             options={"require": ["exp", "iat"]})
    except jwt.InvalidTokenError as e:
        logger.debug("Rejected access token: %s", e)
        return None

    user_id = payload.get("user_id")
    username = payload.get("username")
    if not user_id or not username:
        return None
    return TokenData(user_id=user_id, username=username)
