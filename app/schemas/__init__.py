"""Pydantic schemas for request/response validation."""

from app.schemas.error import ErrorResponse
from app.schemas.token import TokenData
from app.schemas.user import (
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfo,
)
from app.schemas.hydration import (
    CreateEntryRequest,
    HydrationEntryResponse,
    HydrationStats,
    UpdateGoalRequest,
    UpdateGoalResponse,
)

__all__ = [
    "ErrorResponse",
    "TokenData",
    "LoginRequest",
    "LoginResponse",
    "ProfileResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserInfo",
    "CreateEntryRequest",
    "HydrationEntryResponse",
    "HydrationStats",
    "UpdateGoalRequest",
    "UpdateGoalResponse",
]
