from __future__ import annotations

import logging
from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, datetime, timedelta, timezone
from typing import Any, Callable

from datekit.calendar.iso_week import get_iso_week_year, set_iso_week_year
from datekit.calendar.weekday import is_saturday, is_sunday, is_weekend
from datekit.core import (
    NaT,
    construct_from,
    resolve_wall_time,
    to_amount,
    to_date,
    to_instant,
    to_number,
)

logger = logging.getLogger(__name__)

MILLISECONDS_IN_SECOND = 1000
MILLISECONDS_IN_MINUTE = 60 * MILLISECONDS_IN_SECOND
MILLISECONDS_IN_HOUR = 60 * MILLISECONDS_IN_MINUTE

ShiftFn = Callable[[datetime, int], datetime]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ── shifts on normalized values ──────────────────────────────────────────────
#
# Each shift takes a valid datetime and a whole amount and raises
# OverflowError when the result leaves the datetime range.

def _local_from_instant(instant: datetime) -> datetime:
    # fromtimestamp sets fold on the repeated hour after a fall-back change.
    seconds, micros = divmod((instant - _EPOCH) // timedelta(microseconds=1), 1_000_000)
    try:
        return datetime.fromtimestamp(seconds).replace(microsecond=micros)
    except (OSError, ValueError) as exc:
        raise OverflowError(str(exc)) from exc


def _shift_milliseconds(value: datetime, amount: int) -> datetime:
    delta = timedelta(milliseconds=amount)
    # Elapsed time: shift the instant, not the wall clock.
    if value.tzinfo is None:
        # Naive values are system local time, like timestamps.
        try:
            instant = to_instant(value)
        except (OSError, ValueError) as exc:
            raise OverflowError(str(exc)) from exc
        return _local_from_instant(instant + delta)
    return (value.astimezone(timezone.utc) + delta).astimezone(value.tzinfo)


def _shift_days(value: datetime, amount: int) -> datetime:
    if not amount:
        return value
    return resolve_wall_time(value + timedelta(days=amount))


def _shift_months(value: datetime, amount: int) -> datetime:
    if not amount:
        return value
    year, month = divmod(value.year * 12 + value.month - 1 + amount, 12)
    month += 1
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError(f"year {year} is out of range")

    # Clamp to the end of the target month instead of spilling into the next
    # one: 31 Dec + 2 months is 28/29 Feb, not 3 Mar.
    day = min(value.day, monthrange(year, month)[1])
    return resolve_wall_time(value.replace(year=year, month=month, day=day))


def _shift_business_days(value: datetime, amount: int) -> datetime:
    started_on_weekend = is_weekend(value)
    hour = value.hour
    sign = -1 if amount < 0 else 1

    full_weeks = sign * (abs(amount) // 5)
    result = _shift_days(value, full_weeks * 7)

    rest = abs(amount) % 5
    while rest > 0:
        result = _shift_days(result, sign)
        if not is_weekend(result):
            rest -= 1

    # A weekend start shifted by a multiple of 5 lands on a weekend again;
    # step to the nearest business day on the near side of the target.
    if started_on_weekend and is_weekend(result) and amount != 0:
        if is_saturday(result):
            result = _shift_days(result, 2 if sign < 0 else -1)
        if is_sunday(result):
            result = _shift_days(result, 1 if sign < 0 else -2)

    # Walking across a DST change can move the hour; put it back.
    return resolve_wall_time(result.replace(hour=hour))


def _apply(date: Any, shift: ShiftFn, amount: int | None) -> Any:
    value = to_date(date)
    if value is NaT or amount is None:
        return construct_from(date, NaT)
    try:
        result = shift(value, amount)
    except OverflowError:
        logger.debug("%s(%r, %r) is outside the datetime range.", shift.__name__, value, amount)
        return construct_from(date, NaT)
    return construct_from(date, result)


# ── fixed-duration units ─────────────────────────────────────────────────────

def add_milliseconds(date: Any, amount: Any) -> Any:
    """
    Add ``amount`` milliseconds of elapsed time to ``date``.

    Fractional amounts are truncated toward zero (floor for positive, ceil for
    negative).  The shift is applied to the instant: naive datetimes and
    timestamps are read as system local time and aware datetimes in their own
    zone, so the wall clock moves with any DST change in between.

    Example::

        add_milliseconds(datetime(2014, 7, 10, 12, 45, 30), 750)
        # → 2014-07-10 12:45:30.750
    """
    return _apply(date, _shift_milliseconds, to_amount(amount))


def add_seconds(date: Any, amount: Any) -> Any:
    return add_milliseconds(date, to_number(amount) * MILLISECONDS_IN_SECOND)


def add_minutes(date: Any, amount: Any) -> Any:
    return add_milliseconds(date, to_number(amount) * MILLISECONDS_IN_MINUTE)


def add_hours(date: Any, amount: Any) -> Any:
    return add_milliseconds(date, to_number(amount) * MILLISECONDS_IN_HOUR)


# ── calendar units ───────────────────────────────────────────────────────────

def add_days(date: Any, amount: Any) -> Any:
    """
    Add ``amount`` calendar days, keeping the wall-clock time.

    Zero days returns the input unchanged.  A NaN amount or an invalid date
    yields NaT.
    """
    return _apply(date, _shift_days, to_amount(amount))


def add_weeks(date: Any, amount: Any) -> Any:
    return add_days(date, to_number(amount) * 7)


def add_months(date: Any, amount: Any) -> Any:
    """
    Add ``amount`` months to ``date``.

    When the day of month does not exist in the target month the result is
    clamped to that month's last day.  The wall-clock time is kept, also
    across DST transitions, and zero months returns the input unchanged.

    Example::

        add_months(datetime(2014, 12, 31), 2)   # → 2015-02-28
    """
    return _apply(date, _shift_months, to_amount(amount))


def add_quarters(date: Any, amount: Any) -> Any:
    return add_months(date, to_number(amount) * 3)


def add_years(date: Any, amount: Any) -> Any:
    return add_months(date, to_number(amount) * 12)


def add_iso_week_years(date: Any, amount: Any) -> Any:
    """
    Add ``amount`` ISO week-numbering years::

        add_iso_week_years(datetime(2010, 7, 2), 5)   # → 2015-06-26
    """
    amount = to_amount(amount)
    if amount is None:
        return construct_from(date, NaT)
    return set_iso_week_year(date, get_iso_week_year(date) + amount)


def add_business_days(date: Any, amount: Any) -> Any:
    """
    Add ``amount`` business days (Monday to Friday), skipping weekends::

        add_business_days(datetime(2014, 9, 1), 10)   # → 2014-09-15
    """
    return _apply(date, _shift_business_days, to_amount(amount))


# ── subtraction ──────────────────────────────────────────────────────────────

def sub_milliseconds(date: Any, amount: Any) -> Any:
    return add_milliseconds(date, -to_number(amount))


def sub_seconds(date: Any, amount: Any) -> Any:
    return add_seconds(date, -to_number(amount))


def sub_minutes(date: Any, amount: Any) -> Any:
    return add_minutes(date, -to_number(amount))


def sub_hours(date: Any, amount: Any) -> Any:
    return add_hours(date, -to_number(amount))


def sub_days(date: Any, amount: Any) -> Any:
    return add_days(date, -to_number(amount))


def sub_weeks(date: Any, amount: Any) -> Any:
    return add_weeks(date, -to_number(amount))


def sub_months(date: Any, amount: Any) -> Any:
    return add_months(date, -to_number(amount))


def sub_quarters(date: Any, amount: Any) -> Any:
    return add_quarters(date, -to_number(amount))


def sub_years(date: Any, amount: Any) -> Any:
    return add_years(date, -to_number(amount))


def sub_business_days(date: Any, amount: Any) -> Any:
    return add_business_days(date, -to_number(amount))
