"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar queries: day-of-week predicates, ISO week-numbering years, period
boundaries, interval enumeration, comparisons and now-relative checks.

Basic usage::

    from datekit.calendar import each_weekend_of_month, last_day_of_quarter

    last_day_of_quarter(datetime(2014, 9, 2, 11, 55))   # → 2014-09-30 00:00
    each_weekend_of_month(datetime(2022, 2, 1))          # → 8 weekend days

Public API
----------
is_weekend, is_saturday, is_sunday, day_of_week
get_iso_week_year, set_iso_week_year, start_of_iso_week_year
start_of_day, start_of_week, start_of_month, end_of_month,
last_day_of_quarter, last_day_of_decade
each_day_of_interval, each_weekend_of_interval, each_weekend_of_month
compare_asc, compare_desc
is_same_day, is_same_week, is_tomorrow, is_this_week, start_of_tomorrow
"""

from __future__ import annotations

from datekit.calendar.compare import compare_asc, compare_desc
from datekit.calendar.intervals import (
    each_day_of_interval,
    each_weekend_of_interval,
    each_weekend_of_month,
)
from datekit.calendar.iso_week import (
    get_iso_week_year,
    set_iso_week_year,
    start_of_iso_week_year,
)
from datekit.calendar.periods import (
    end_of_month,
    last_day_of_decade,
    last_day_of_quarter,
    start_of_day,
    start_of_month,
    start_of_week,
)
from datekit.calendar.relative import (
    is_same_day,
    is_same_week,
    is_this_week,
    is_tomorrow,
    start_of_tomorrow,
)
from datekit.calendar.weekday import day_of_week, is_saturday, is_sunday, is_weekend

__all__ = [
    "compare_asc",
    "compare_desc",
    "day_of_week",
    "each_day_of_interval",
    "each_weekend_of_interval",
    "each_weekend_of_month",
    "end_of_month",
    "get_iso_week_year",
    "is_same_day",
    "is_same_week",
    "is_saturday",
    "is_sunday",
    "is_this_week",
    "is_tomorrow",
    "is_weekend",
    "last_day_of_decade",
    "last_day_of_quarter",
    "set_iso_week_year",
    "start_of_day",
    "start_of_iso_week_year",
    "start_of_month",
    "start_of_tomorrow",
    "start_of_week",
]
