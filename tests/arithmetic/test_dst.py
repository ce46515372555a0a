"""
tests/arithmetic/test_dst.py

Wall-clock behaviour around the 2017 US DST transitions
(America/New_York: 12 Mar 02:00 → 03:00, 5 Nov 02:00 → 01:00).
Naive values and timestamps are checked with the process TZ set to the same
zone.
"""

import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from datekit.arithmetic import add, add_business_days, add_days, add_hours, add_milliseconds, add_months

NY = ZoneInfo("America/New_York")
HOUR = timedelta(hours=1)


def ny(*args, **kwargs):
    return datetime(*args, tzinfo=NY, **kwargs)


def elapsed(a, b):
    return b.astimezone(timezone.utc) - a.astimezone(timezone.utc)


@pytest.fixture
def dst_start():
    return ny(2017, 3, 12, 3, 0)


@pytest.fixture
def dst_end():
    # First instant after falling back: 01:00 EST
    return ny(2017, 11, 5, 1, 0, fold=1)


# ── add_months ────────────────────────────────────────────────────────────────

class TestMonthsAcrossDST:

    def test_at_dst_start(self, dst_start):
        result = add_months(dst_start, 2)
        assert (result.month, result.day, result.hour, result.minute) == (5, 12, 3, 0)

    @pytest.mark.parametrize("minutes", [30, 60])
    def test_before_dst_start(self, dst_start, minutes):
        date = (dst_start.astimezone(timezone.utc) - timedelta(minutes=minutes)).astimezone(NY)
        result = add_months(date, 2)
        assert (result.year, result.month, result.day) == (2017, 5, 12)
        assert (result.hour, result.minute) == (date.hour, date.minute)

    def test_at_dst_end(self, dst_end):
        result = add_months(dst_end, 2)
        assert (result.year, result.month, result.day) == (2018, 1, 5)
        assert (result.hour, result.minute) == (1, 0)

    @pytest.mark.parametrize("minutes", [30, 60])
    def test_before_dst_end(self, dst_end, minutes):
        date = (dst_end.astimezone(timezone.utc) - timedelta(minutes=minutes)).astimezone(NY)
        result = add_months(date, 2)
        assert (result.year, result.month, result.day) == (2018, 1, 5)
        assert (result.hour, result.minute) == (date.hour, date.minute)

    def test_zero_months_keeps_instant(self, dst_end):
        result = add_months(dst_end, 0)
        assert result is dst_end
        assert result.utcoffset() == dst_end.utcoffset()

    def test_offset_follows_target_month(self):
        result = add_months(ny(2017, 1, 15, 9), 6)
        assert result.utcoffset() == timedelta(hours=-4)
        assert result.hour == 9


# ── days vs hours ─────────────────────────────────────────────────────────────

class TestDaysAcrossDST:

    def test_day_keeps_wall_clock(self):
        start = ny(2017, 3, 11, 12)
        result = add_days(start, 1)
        assert result.hour == 12
        assert elapsed(start, result) == 23 * HOUR

    def test_hours_are_elapsed_time(self):
        result = add_hours(ny(2017, 3, 12, 1, 0), 1)
        assert (result.hour, result.minute) == (3, 0)
        assert result.utcoffset() == timedelta(hours=-4)

    def test_hours_through_fall_back(self):
        result = add_hours(ny(2017, 11, 5, 0, 30), 2)
        assert (result.hour, result.minute) == (1, 30)
        assert result.utcoffset() == timedelta(hours=-5)

    def test_day_into_gap_moves_forward(self):
        result = add_days(ny(2017, 3, 11, 2, 30), 1)
        assert (result.day, result.hour, result.minute) == (12, 3, 30)

    def test_duration_mixes_calendar_and_elapsed(self):
        start = ny(2017, 3, 11, 12)
        result = add(start, {"days": 1, "hours": 1})
        assert result.hour == 13
        assert elapsed(start, result) == 24 * HOUR


class TestBusinessDaysAcrossDST:

    def test_keeps_hour(self):
        # Fri 10 Mar → Mon 13 Mar across the spring-forward Sunday
        result = add_business_days(ny(2017, 3, 10, 8, 15), 1)
        assert (result.day, result.hour, result.minute) == (13, 8, 15)


# ── naive values and timestamps in system local time ─────────────────────────

@pytest.fixture
def new_york_local(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestLocalTimeAcrossDST:

    def test_timestamp_hours_through_fall_back(self, new_york_local):
        ts = ny(2017, 11, 5, 0, 30).timestamp() * 1000
        result = add_hours(ts, 2)
        assert result == datetime(2017, 11, 5, 1, 30)
        assert result.fold == 1
        assert result.timestamp() * 1000 - ts == 2 * 3_600_000

    def test_naive_hours_through_fall_back(self, new_york_local):
        start = datetime(2017, 11, 5, 0, 30)
        result = add_hours(start, 2)
        assert (result.hour, result.minute, result.fold) == (1, 30, 1)
        assert result.timestamp() - start.timestamp() == 2 * 3600

    def test_naive_hours_through_spring_forward(self, new_york_local):
        assert add_hours(datetime(2017, 3, 12, 1, 30), 1) == datetime(2017, 3, 12, 3, 30)

    def test_naive_days_keep_wall_clock(self, new_york_local):
        assert add_days(datetime(2017, 3, 11, 12), 1) == datetime(2017, 3, 12, 12)

    def test_duration_time_stage_is_elapsed(self, new_york_local):
        start = datetime(2017, 11, 5, 0, 30)
        result = add(start, {"minutes": 90})
        assert (result.hour, result.minute, result.fold) == (1, 0, 1)

    def test_timestamp_in_repeated_hour_round_trips(self, new_york_local):
        ts = ny(2017, 11, 5, 1, 15, fold=1).timestamp() * 1000
        result = add_milliseconds(ts, 0)
        assert result.fold == 1
        assert result.timestamp() * 1000 == ts
