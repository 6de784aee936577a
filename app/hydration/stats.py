"""
Hydration statistics: rolling totals and goal progress.

Three windows are evaluated independently against a reference instant
``now`` (all comparisons in UTC):

- **today**: entries whose UTC calendar date equals ``now``'s date,
- **week**: entries strictly after ``now - 7 days``,
- **month**: entries strictly after ``month_start(now)``, one calendar
  month back with overflow days rolled forward (Mar 31 gives Mar 3).

An entry may count toward all three totals. The function is pure: no I/O,
no clock reads, no state, so it is safe to call repeatedly and
concurrently. Inputs are expected to have been validated upstream
(positive amounts), nothing here raises.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Protocol

from app.core.time_utils import to_utc
from app.schemas.hydration import HydrationStats

WEEK_WINDOW = datetime.timedelta(days=7)


class EntryLike(Protocol):
    """Anything carrying an amount (ml) and the time it was logged."""

    amount: int
    timestamp: datetime.datetime


def month_start(now: datetime.datetime) -> datetime.datetime:
    """Same day and time one month earlier.

    Days past the end of the previous month carry over into the next one,
    so Mar 31 maps to Mar 3 (Feb 28 plus three days) in a common year.
    """
    year, month = divmod(now.year * 12 + now.month - 2, 12)
    first = now.replace(year=year, month=month + 1, day=1)
    return first + datetime.timedelta(days=now.day - 1)


def goal_percentage(total_today: int, goal: int) -> int:
    """Truncated ``total_today * 100 / goal``; 0 for a non-positive goal."""
    if goal <= 0:
        return 0
    return total_today * 100 // goal


def compute_stats(entries: Iterable[EntryLike], goal: int, now: datetime.datetime) -> HydrationStats:
    """Compute today/week/month totals and goal progress for one user.

    Args:
        entries: The user's entries, in any order.
        goal: Daily goal in milliliters.
        now: Reference instant the windows are anchored to.

    Returns:
        :class:`HydrationStats` for the given inputs.
    """
    now = to_utc(now)
    today = now.date()
    week_start = now - WEEK_WINDOW
    month_boundary = month_start(now)

    total_today = 0
    total_week = 0
    total_month = 0
    for entry in entries:
        ts = to_utc(entry.timestamp)
        if ts.date() == today:
            total_today += entry.amount
        if ts > week_start:
            total_week += entry.amount
        if ts > month_boundary:
            total_month += entry.amount

    return HydrationStats(total_today=total_today, total_week=total_week, total_month=total_month, goal=goal,
                          goal_percentage=goal_percentage(total_today, goal), )
