from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from datekit._exceptions import InvalidTimeValueError
from datekit.calendar.periods import end_of_month, start_of_month
from datekit.calendar.weekday import is_weekend
from datekit.core import NaT, construct_from, resolve_wall_time, to_date


def _valid(date: Any) -> datetime:
    value = to_date(date)
    if value is NaT:
        raise InvalidTimeValueError("The passed date is invalid")
    return value


def each_day_of_interval(start: Any, end: Any) -> list[Any]:
    """
    Midnight of every calendar day from ``start`` to ``end`` inclusive.

    A reversed interval yields the days in descending order.  Results have
    the kind of ``start``.

    :raises InvalidTimeValueError: either bound is invalid.
    """
    template = _valid(start).replace(hour=0, minute=0, second=0, microsecond=0)
    first, last = template.date(), _valid(end).date()
    step = timedelta(days=1 if first <= last else -1)

    days = []
    current = first
    while True:
        day = template.replace(year=current.year, month=current.month, day=current.day)
        days.append(construct_from(start, resolve_wall_time(day)))
        if current == last:
            break
        current += step
    return days


def each_weekend_of_interval(start: Any, end: Any) -> list[Any]:
    return [day for day in each_day_of_interval(start, end) if is_weekend(day)]


def each_weekend_of_month(date: Any) -> list[Any]:
    """
    Every Saturday and Sunday of the month of ``date``::

        each_weekend_of_month(datetime(2022, 2, 1))
        # → [2022-02-05, 2022-02-06, 2022-02-12, ..., 2022-02-27]

    :raises InvalidTimeValueError: ``date`` is invalid.
    """
    _valid(date)
    return each_weekend_of_interval(start_of_month(date), end_of_month(date))
