"""
Hydration API schemas.

Request/response models for entries, goal updates and statistics.
"""

import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, Field


# Request schemas
class CreateEntryRequest(BaseModel):
    """Schema for logging a hydration entry."""

    amount: int = Field(..., ge=1, description="Amount in milliliters", examples=[250])
    type: str = Field(..., min_length=1, max_length=50, description="Drink label", examples=["water"])
    timestamp: Optional[datetime.datetime] = Field(
        None, description="When the intake happened (defaults to now, interpreted as UTC if naive)"
    )


class UpdateGoalRequest(BaseModel):
    """Schema for updating the daily goal."""

    goal: int = Field(..., ge=1, description="Daily goal in milliliters", examples=[2000])


# Response schemas
class HydrationEntryResponse(BaseModel):
    """Schema for a hydration entry in API responses."""

    id: uuid.UUID
    user_id: uuid.UUID
    amount: int
    timestamp: datetime.datetime
    type: str

    class Config:
        from_attributes = True


class UpdateGoalResponse(BaseModel):
    message: str = "Goal updated successfully"
    goal: int


class HydrationStats(BaseModel):
    """Rolling hydration totals relative to a reference instant.

    ``goal_percentage`` is ``total_today * 100 // goal`` (truncated), and
    ``0`` when the goal is not positive.
    """

    total_today: int = Field(..., description="Sum of today's entries (UTC calendar day)", examples=[1500])
    total_week: int = Field(..., description="Sum of entries in the last 7 days", examples=[10500])
    total_month: int = Field(..., description="Sum of entries in the last calendar month", examples=[45000])
    goal: int = Field(..., description="Current daily goal", examples=[2000])
    goal_percentage: int = Field(..., description="Today's progress towards the goal", examples=[75])
