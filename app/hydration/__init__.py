"""Hydration core: statistics aggregation and input validation."""

from app.hydration.stats import compute_stats
from app.hydration.validation import validate_entry, validate_goal

__all__ = ["compute_stats", "validate_entry", "validate_goal"]
