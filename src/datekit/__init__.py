"""
datekit
~~~~~~~

Date arithmetic and formatting helpers: small, stateless functions over
``datetime`` values (or millisecond timestamps, ``date`` or
``numpy.datetime64``), returning a new value of the caller's kind.

Basic usage::

    from datetime import datetime
    import datekit

    datekit.add_months(datetime(2014, 12, 31), 2)         # → 2015-02-28
    datekit.add_business_days(datetime(2014, 9, 1), 10)   # → 2014-09-15
    datekit.format_iso9075(datetime(2019, 9, 18, 19, 0, 52))

Invalid dates and NaN amounts propagate as ``datekit.NaT`` instead of
raising; only formatting or enumerating an invalid date raises
``InvalidTimeValueError``.
"""

from __future__ import annotations

import logging

from datekit._exceptions import DateKitError, InvalidTimeValueError
from datekit._options import DefaultOptions, get_default_options, set_default_options
from datekit.arithmetic import (
    Duration,
    add,
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
    sub,
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
from datekit.calendar import (
    compare_asc,
    compare_desc,
    day_of_week,
    each_day_of_interval,
    each_weekend_of_interval,
    each_weekend_of_month,
    end_of_month,
    get_iso_week_year,
    is_same_day,
    is_same_week,
    is_saturday,
    is_sunday,
    is_this_week,
    is_tomorrow,
    is_weekend,
    last_day_of_decade,
    last_day_of_quarter,
    set_iso_week_year,
    start_of_day,
    start_of_iso_week_year,
    start_of_month,
    start_of_tomorrow,
    start_of_week,
)
from datekit.core import (
    DateKind,
    NaT,
    NaTType,
    construct_from,
    is_date,
    is_valid,
    register_kind,
    to_date,
)
from datekit.format import add_leading_zeros, format_iso9075

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DateKind",
    "DateKitError",
    "DefaultOptions",
    "Duration",
    "InvalidTimeValueError",
    "NaT",
    "NaTType",
    "add",
    "add_business_days",
    "add_days",
    "add_hours",
    "add_iso_week_years",
    "add_leading_zeros",
    "add_milliseconds",
    "add_minutes",
    "add_months",
    "add_quarters",
    "add_seconds",
    "add_weeks",
    "add_years",
    "compare_asc",
    "compare_desc",
    "construct_from",
    "day_of_week",
    "each_day_of_interval",
    "each_weekend_of_interval",
    "each_weekend_of_month",
    "end_of_month",
    "format_iso9075",
    "get_default_options",
    "get_iso_week_year",
    "is_date",
    "is_same_day",
    "is_same_week",
    "is_saturday",
    "is_sunday",
    "is_this_week",
    "is_tomorrow",
    "is_valid",
    "is_weekend",
    "last_day_of_decade",
    "last_day_of_quarter",
    "register_kind",
    "set_default_options",
    "set_iso_week_year",
    "start_of_day",
    "start_of_iso_week_year",
    "start_of_month",
    "start_of_tomorrow",
    "start_of_week",
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
    "to_date",
]
