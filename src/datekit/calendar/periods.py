from __future__ import annotations

from calendar import monthrange
from datetime import datetime, timedelta
from typing import Any, Callable

from datekit._options import resolve_week_starts_on
from datekit.core import NaT, construct_from, resolve_wall_time, to_date


def _midnight(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _on_day(value: datetime, year: int, month: int, day: int) -> datetime:
    return resolve_wall_time(_midnight(value).replace(year=year, month=month, day=day))


def _transform(date: Any, fn: Callable[[datetime], datetime]) -> Any:
    value = to_date(date)
    if value is NaT:
        return construct_from(date, NaT)
    return construct_from(date, fn(value))


def start_of_day(date: Any) -> Any:
    return _transform(date, lambda v: resolve_wall_time(_midnight(v)))


def start_of_month(date: Any) -> Any:
    return _transform(date, lambda v: _on_day(v, v.year, v.month, 1))


def end_of_month(date: Any) -> Any:
    """Last microsecond of the month of ``date``."""
    def last_instant(value: datetime) -> datetime:
        day = monthrange(value.year, value.month)[1]
        end = value.replace(day=day, hour=23, minute=59, second=59, microsecond=999999)
        return resolve_wall_time(end)

    return _transform(date, last_instant)


def start_of_week(date: Any, week_starts_on: int | None = None) -> Any:
    """
    Midnight of the first day of the week containing ``date``.

    ``week_starts_on`` counts from Sunday (0) to Saturday (6); ``None``
    uses the library default.
    """
    first_day = resolve_week_starts_on(week_starts_on)

    def week_start(value: datetime) -> datetime:
        day = (value.weekday() + 1) % 7
        back = (day - first_day) % 7
        start = value.date() - timedelta(days=back)
        return _on_day(value, start.year, start.month, start.day)

    return _transform(date, week_start)


def last_day_of_quarter(date: Any) -> Any:
    """
    Midnight of the last day of the quarter containing ``date``::

        last_day_of_quarter(datetime(2014, 9, 2, 11, 55))   # → 2014-09-30 00:00
    """
    def quarter_end(value: datetime) -> datetime:
        month = value.month - (value.month - 1) % 3 + 2
        return _on_day(value, value.year, month, monthrange(value.year, month)[1])

    return _transform(date, quarter_end)


def last_day_of_decade(date: Any) -> Any:
    """
    Midnight of 31 December of the last year of the decade::

        last_day_of_decade(datetime(2012, 12, 21, 21, 12))   # → 2019-12-31 00:00
    """
    return _transform(date, lambda v: _on_day(v, v.year // 10 * 10 + 9, 12, 31))
