"""
User API schemas.

Pydantic models for registration, login and profile request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field


# Request schemas
class RegisterRequest(BaseModel):
    """Schema for user registration."""
    username: str = Field(..., min_length=1, max_length=50, examples=["john_doe"])
    email: EmailStr = Field(..., examples=["john@example.com"])
    password: str = Field(..., min_length=6, description="Password (min 6 characters)", examples=["password123"])


class LoginRequest(BaseModel):
    """Schema for user login."""
    username: str = Field(..., min_length=1, examples=["john_doe"])
    password: str = Field(..., min_length=1, examples=["password123"])


# Response schemas
class RegisterResponse(BaseModel):
    message: str = "User registered successfully"
    user_id: str


class UserInfo(BaseModel):
    """Schema for user data in API responses (no sensitive data)."""
    id: str
    username: str
    email: str


class LoginResponse(BaseModel):
    token: str
    user: UserInfo


class ProfileResponse(BaseModel):
    """Identity of the caller as read from the access token."""
    user_id: str
    username: str
