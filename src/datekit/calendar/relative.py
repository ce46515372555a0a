"""
Comparisons against the current time.

``start_of_tomorrow``, ``is_tomorrow`` and ``is_this_week`` read the clock
through :mod:`datekit.core.clock` and are therefore impure.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Any

from datekit.calendar.periods import start_of_week
from datekit.core import NaT, clock, to_date, to_instant


def _now_like(value: datetime) -> datetime:
    current = clock.now()
    if value.tzinfo is None:
        return current
    return to_instant(current).astimezone(value.tzinfo)


def start_of_tomorrow() -> datetime:
    today = clock.now().date()
    return datetime.combine(today + timedelta(days=1), time())


def is_same_day(left: Any, right: Any) -> bool:
    a, b = to_date(left), to_date(right)
    if a is NaT or b is NaT:
        return False
    return a.date() == b.date()


def is_same_week(left: Any, right: Any, week_starts_on: int | None = None) -> bool:
    a, b = to_date(left), to_date(right)
    if a is NaT or b is NaT:
        return False
    return (
        start_of_week(a, week_starts_on).date()
        == start_of_week(b, week_starts_on).date()
    )


def is_tomorrow(date: Any) -> bool:
    value = to_date(date)
    if value is NaT:
        return False
    return value.date() == _now_like(value).date() + timedelta(days=1)


def is_this_week(date: Any, week_starts_on: int | None = None) -> bool:
    value = to_date(date)
    if value is NaT:
        return False
    return is_same_week(value, _now_like(value), week_starts_on)
