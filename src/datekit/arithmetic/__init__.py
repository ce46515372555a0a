"""
datekit.arithmetic
~~~~~~~~~~~~~~~~~~

Calendar-aware date arithmetic.  Calendar units (days, weeks, months,
quarters, years, ISO week-years, business days) move the wall clock; time
units (hours, minutes, seconds, milliseconds) add elapsed time.

Basic usage::

    from datekit.arithmetic import add, add_business_days, add_months

    add_months(datetime(2014, 12, 31), 2)         # → 2015-02-28
    add_business_days(datetime(2014, 9, 1), 10)   # → 2014-09-15
    add(datetime(2014, 9, 1), {"months": 1, "hours": 5})

An invalid date or a NaN amount never raises; the result is ``NaT`` of the
caller's kind.

Public API
----------
add_milliseconds, add_seconds, add_minutes, add_hours
add_days, add_weeks, add_months, add_quarters, add_years
add_iso_week_years, add_business_days
add, Duration
sub_* counterparts and sub
"""

from __future__ import annotations

from datekit.arithmetic.arithmetic import (
    MILLISECONDS_IN_HOUR,
    MILLISECONDS_IN_MINUTE,
    MILLISECONDS_IN_SECOND,
    add_business_days,
    add_days,
    add_hours,
    add_iso_week_years,
    add_milliseconds,
    add_minutes,
    add_months,
    add_quarters,
    add_seconds,
    add_weeks,
    add_years,
    sub_business_days,
    sub_days,
    sub_hours,
    sub_milliseconds,
    sub_minutes,
    sub_months,
    sub_quarters,
    sub_seconds,
    sub_weeks,
    sub_years,
)
from datekit.arithmetic.duration import DURATION_FIELDS, Duration, add, sub

__all__ = [
    "DURATION_FIELDS",
    "Duration",
    "MILLISECONDS_IN_HOUR",
    "MILLISECONDS_IN_MINUTE",
    "MILLISECONDS_IN_SECOND",
    "add",
    "add_business_days",
    "add_days",
    "add_hours",
    "add_iso_week_years",
    "add_milliseconds",
    "add_minutes",
    "add_months",
    "add_quarters",
    "add_seconds",
    "add_weeks",
    "add_years",
    "sub",
    "sub_business_days",
    "sub_days",
    "sub_hours",
    "sub_milliseconds",
    "sub_minutes",
    "sub_months",
    "sub_quarters",
    "sub_seconds",
    "sub_weeks",
    "sub_years",
]
