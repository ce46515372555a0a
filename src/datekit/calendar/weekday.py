from __future__ import annotations

from typing import Any

from datekit.core import NaT, to_date

SATURDAY = 5
SUNDAY = 6


def _weekday(date: Any) -> int | None:
    value = to_date(date)
    if value is NaT:
        return None
    return value.weekday()


def is_saturday(date: Any) -> bool:
    return _weekday(date) == SATURDAY


def is_sunday(date: Any) -> bool:
    return _weekday(date) == SUNDAY


def is_weekend(date: Any) -> bool:
    return _weekday(date) in (SATURDAY, SUNDAY)


def day_of_week(date: Any) -> int | float:
    """Day of the week counted from Sunday (0) to Saturday (6); NaN if invalid."""
    weekday = _weekday(date)
    if weekday is None:
        return float("nan")
    return (weekday + 1) % 7
