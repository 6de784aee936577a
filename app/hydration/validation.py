"""
Entry and goal validity predicates.

Pure boolean gates used by the service layer before anything is persisted.
"""


def validate_entry(amount: int, entry_type: str) -> bool:
    """True iff the amount is positive and the drink type is non-empty."""
    return amount > 0 and bool(entry_type)


def validate_goal(goal: int) -> bool:
    """True iff the daily goal is at least 1 ml."""
    return goal >= 1
