"""Tests for the hydration statistics aggregation.

These are *pure unit tests*: entries are built in memory and the
reference instant is always passed explicitly.
"""

import datetime
import random
import uuid

import pytest

from app.core.time_utils import to_utc
from app.hydration.stats import compute_stats, goal_percentage, month_start
from app.models.hydration_entry import HydrationEntry

NOW = datetime.datetime(2026, 3, 15, 12, 0, 0)


# ======================================================================
# Helpers
# ======================================================================


def _entry(amount: int, timestamp: datetime.datetime, entry_type: str = "water") -> HydrationEntry:
    return HydrationEntry(id=uuid.uuid4(), user_id=uuid.uuid4(), amount=amount, type=entry_type,
                          timestamp=timestamp)


def _random_entries(rng: random.Random, now: datetime.datetime, count: int) -> list[HydrationEntry]:
    """Entries spread over the 60 days before ``now`` (never in the future)."""
    entries = []
    for _ in range(count):
        age = datetime.timedelta(seconds=rng.randint(0, 60 * 24 * 3600))
        entries.append(_entry(rng.randint(1, 1000), now - age))
    return entries


# ======================================================================
# compute_stats
# ======================================================================


class TestComputeStats:
    def test_reference_scenario(self):
        entries = [
            _entry(200, NOW - datetime.timedelta(hours=1)),
            _entry(300, NOW - datetime.timedelta(days=2)),
            _entry(400, NOW - datetime.timedelta(days=10)),
        ]
        stats = compute_stats(entries, 1000, NOW)

        assert stats.total_today == 200
        assert stats.total_week == 500
        assert stats.total_month == 900
        assert stats.goal == 1000
        assert stats.goal_percentage == 20

    @pytest.mark.parametrize("goal", [0, 1, 2000])
    def test_empty_history(self, goal):
        stats = compute_stats([], goal, NOW)
        assert stats.total_today == 0
        assert stats.total_week == 0
        assert stats.total_month == 0
        assert stats.goal == goal
        assert stats.goal_percentage == 0

    def test_zero_goal_does_not_divide(self):
        stats = compute_stats([_entry(500, NOW)], 0, NOW)
        assert stats.total_today == 500
        assert stats.goal_percentage == 0

    def test_negative_goal_yields_zero_percentage(self):
        stats = compute_stats([_entry(500, NOW)], -100, NOW)
        assert stats.goal_percentage == 0

    def test_entry_older_than_month_is_ignored(self):
        stats = compute_stats([_entry(700, NOW - datetime.timedelta(days=45))], 2000, NOW)
        assert (stats.total_today, stats.total_week, stats.total_month) == (0, 0, 0)

    def test_entry_counts_in_every_window(self):
        stats = compute_stats([_entry(250, NOW - datetime.timedelta(minutes=5))], 2000, NOW)
        assert (stats.total_today, stats.total_week, stats.total_month) == (250, 250, 250)

    def test_input_is_not_mutated_and_result_is_repeatable(self):
        entries = [_entry(100, NOW - datetime.timedelta(hours=h)) for h in range(0, 200, 7)]
        snapshot = [(e.amount, e.timestamp) for e in entries]

        first = compute_stats(entries, 1500, NOW)
        second = compute_stats(entries, 1500, NOW)

        assert first == second
        assert [(e.amount, e.timestamp) for e in entries] == snapshot

    def test_accepts_any_iterable(self):
        entries = (_entry(a, NOW) for a in (100, 200))
        assert compute_stats(entries, 1000, NOW).total_today == 300


# ======================================================================
# Window boundaries
# ======================================================================


class TestWindowBoundaries:
    def test_week_start_is_excluded(self):
        stats = compute_stats([_entry(300, NOW - datetime.timedelta(days=7))], 2000, NOW)
        assert stats.total_week == 0
        assert stats.total_month == 300

    def test_just_after_week_start_is_included(self):
        ts = NOW - datetime.timedelta(days=7) + datetime.timedelta(microseconds=1)
        stats = compute_stats([_entry(300, ts)], 2000, NOW)
        assert stats.total_week == 300

    def test_month_start_is_excluded(self):
        stats = compute_stats([_entry(300, datetime.datetime(2026, 2, 15, 12, 0, 0))], 2000, NOW)
        assert stats.total_month == 0

    def test_just_after_month_start_is_included(self):
        stats = compute_stats([_entry(300, datetime.datetime(2026, 2, 15, 12, 0, 1))], 2000, NOW)
        assert stats.total_month == 300

    def test_month_start_rolls_over_past_end_of_shorter_month(self):
        """Mar 31 minus one month is Mar 3: Feb 31 overflows by three days (2026 is not a leap year)."""
        now = datetime.datetime(2026, 3, 31, 12, 0, 0)
        start_of_march = _entry(100, datetime.datetime(2026, 3, 1, 12, 0, 0))
        on_boundary = _entry(200, datetime.datetime(2026, 3, 3, 12, 0, 0))
        after_boundary = _entry(400, datetime.datetime(2026, 3, 3, 12, 0, 1))

        assert compute_stats([start_of_march], 2000, now).total_month == 0
        stats = compute_stats([start_of_march, on_boundary, after_boundary], 2000, now)
        assert stats.total_month == 400

    def test_today_starts_at_midnight(self):
        midnight = datetime.datetime(2026, 3, 15, 0, 0, 0)
        stats = compute_stats([_entry(150, midnight)], 2000, NOW)
        assert stats.total_today == 150

    def test_yesterday_late_is_not_today(self):
        stats = compute_stats([_entry(150, datetime.datetime(2026, 3, 14, 23, 59, 59))], 2000, NOW)
        assert stats.total_today == 0
        assert stats.total_week == 150

    def test_later_today_counts_toward_today(self):
        stats = compute_stats([_entry(150, datetime.datetime(2026, 3, 15, 23, 0, 0))], 2000, NOW)
        assert stats.total_today == 150

    def test_future_entry_on_another_day_is_not_today(self):
        """Windows are independent: a future entry is recent but not today."""
        stats = compute_stats([_entry(150, NOW + datetime.timedelta(days=2))], 2000, NOW)
        assert stats.total_today == 0
        assert stats.total_week == 150
        assert stats.total_month == 150


# ======================================================================
# month_start
# ======================================================================


class TestMonthStart:
    @pytest.mark.parametrize(
        "now, expected",
        [
            (datetime.datetime(2026, 3, 15, 12, 0), datetime.datetime(2026, 2, 15, 12, 0)),
            (datetime.datetime(2026, 3, 31, 12, 0), datetime.datetime(2026, 3, 3, 12, 0)),
            (datetime.datetime(2026, 3, 29, 8, 30), datetime.datetime(2026, 3, 1, 8, 30)),
            (datetime.datetime(2024, 3, 30, 12, 0), datetime.datetime(2024, 3, 1, 12, 0)),
            (datetime.datetime(2024, 3, 29, 12, 0), datetime.datetime(2024, 2, 29, 12, 0)),
            (datetime.datetime(2026, 5, 31, 23, 59), datetime.datetime(2026, 5, 1, 23, 59)),
            (datetime.datetime(2026, 1, 31, 6, 0), datetime.datetime(2025, 12, 31, 6, 0)),
            (datetime.datetime(2026, 1, 1, 0, 0), datetime.datetime(2025, 12, 1, 0, 0)),
        ],
        ids=["mid-month", "mar-31", "mar-29", "leap-mar-30", "leap-mar-29", "may-31", "jan-31", "jan-1"],
    )
    def test_one_month_back(self, now, expected):
        assert month_start(now) == expected

    def test_keeps_time_zone(self):
        now = datetime.datetime(2026, 3, 31, 12, 0, tzinfo=datetime.timezone.utc)
        assert month_start(now).tzinfo is datetime.timezone.utc


# ======================================================================
# Time zones
# ======================================================================


class TestTimeZones:
    def test_today_is_the_utc_calendar_day(self):
        """01:00 at UTC+2 is still the previous day in UTC."""
        plus_two = datetime.timezone(datetime.timedelta(hours=2))
        now = datetime.datetime(2026, 3, 15, 1, 0, 0, tzinfo=plus_two)

        entries = [
            _entry(100, datetime.datetime(2026, 3, 14, 22, 0, 0)),  # naive, UTC
            _entry(200, datetime.datetime(2026, 3, 15, 0, 30, 0, tzinfo=plus_two)),  # 14th 22:30 UTC
        ]
        stats = compute_stats(entries, 1000, now)
        assert stats.total_today == 300

    def test_aware_and_naive_inputs_agree(self):
        entries = [_entry(100, NOW - datetime.timedelta(days=d)) for d in (0, 3, 20)]
        aware_now = NOW.replace(tzinfo=datetime.timezone.utc)
        assert compute_stats(entries, 1000, NOW) == compute_stats(entries, 1000, aware_now)

    def test_to_utc(self):
        minus_five = datetime.timezone(datetime.timedelta(hours=-5))
        evening = datetime.datetime(2026, 1, 1, 20, 0, tzinfo=minus_five)
        utc_value = datetime.datetime(2026, 1, 2, 1, 0, tzinfo=datetime.timezone.utc)

        assert to_utc(evening) == utc_value
        assert to_utc(evening).utcoffset() == datetime.timedelta(0)
        assert to_utc(datetime.datetime(2026, 1, 2, 1, 0)) == utc_value


# ======================================================================
# goal_percentage
# ======================================================================


class TestGoalPercentage:
    @pytest.mark.parametrize(
        "total, goal, expected",
        [
            (0, 2000, 0),
            (1999, 2000, 99),
            (2000, 2000, 100),
            (3000, 2000, 150),
            (1, 3, 33),
            (2, 3, 66),
            (500, 0, 0),
            (500, -1, 0),
        ],
    )
    def test_truncating_division(self, total, goal, expected):
        assert goal_percentage(total, goal) == expected


# ======================================================================
# Properties over random histories
# ======================================================================


class TestRandomHistories:
    @pytest.mark.parametrize("seed", range(25))
    def test_windows_are_ordered_for_past_entries(self, seed):
        rng = random.Random(seed)
        entries = _random_entries(rng, NOW, rng.randint(0, 40))

        stats = compute_stats(entries, rng.randint(0, 4000), NOW)
        assert stats.total_month >= stats.total_week >= stats.total_today >= 0

    @pytest.mark.parametrize("seed", range(10))
    def test_order_does_not_matter(self, seed):
        rng = random.Random(seed)
        entries = _random_entries(rng, NOW, 30)
        shuffled = list(entries)
        rng.shuffle(shuffled)

        assert compute_stats(entries, 2000, NOW) == compute_stats(shuffled, 2000, NOW)
