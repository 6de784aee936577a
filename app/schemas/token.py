"""
Token schemas.

Identity carried inside an access token.
"""

from pydantic import BaseModel


class TokenData(BaseModel):
    """Schema for decoded token data."""
    user_id: str
    username: str
