"""ISO 8601 week-numbering year accessors."""

from __future__ import annotations

import datetime as _dt
import logging
import math
from typing import Any

from datekit.core import NaT, construct_from, resolve_wall_time, to_amount, to_date

logger = logging.getLogger(__name__)


def get_iso_week_year(date: Any) -> int | float:
    """
    ISO week-numbering year of ``date``; NaN for an invalid date.

    Close to 1 January this can differ from the calendar year::

        get_iso_week_year(datetime(2005, 1, 2))   # → 2004
    """
    value = to_date(date)
    if value is NaT:
        return math.nan
    return value.isocalendar()[0]


def start_of_iso_week_year(date: Any) -> Any:
    """Monday 00:00 of week 1 of the ISO week-numbering year of ``date``."""
    value = to_date(date)
    if value is NaT:
        return construct_from(date, NaT)
    first = _dt.date.fromisocalendar(value.isocalendar()[0], 1, 1)
    start = value.replace(
        year=first.year, month=first.month, day=first.day,
        hour=0, minute=0, second=0, microsecond=0,
    )
    return construct_from(date, resolve_wall_time(start))


def set_iso_week_year(date: Any, week_year: Any) -> Any:
    """
    Move ``date`` into ISO week-numbering year ``week_year``.

    The number of days since the start of the current ISO week-year is kept,
    so a date in week 53 lands in week 1 of the following year when the
    target year has only 52 weeks.  Time of day is preserved.
    """
    value = to_date(date)
    target_year = to_amount(week_year)
    if value is NaT or target_year is None:
        return construct_from(date, NaT)

    current = _dt.date.fromisocalendar(value.isocalendar()[0], 1, 1)
    offset = value.date() - current
    try:
        target = _dt.date.fromisocalendar(target_year, 1, 1) + offset
    except (OverflowError, ValueError):
        logger.debug("ISO week-year %r is outside the representable range.", target_year)
        return construct_from(date, NaT)

    moved = value.replace(year=target.year, month=target.month, day=target.day)
    return construct_from(date, resolve_wall_time(moved))
