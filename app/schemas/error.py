"""Error response schema shared by both services."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    error: str = Field(..., examples=["Invalid input data"])
