from __future__ import annotations

from typing import Any, Union

import numpy as np

ArrayLike = Union[np.datetime64, "np.ndarray"]

# Any weekday will do; stands in for NaT where numpy refuses NaT input.
_PLACEHOLDER_DAY = np.datetime64("1970-01-05", "D")


def _as_datetime64(dates: Any) -> np.ndarray:
    arr = np.asarray(dates)
    if arr.dtype.kind != "M":
        arr = arr.astype("datetime64[us]")
    # Day resolution at least, so time-of-day survives the arithmetic.
    return arr.astype(np.promote_types(arr.dtype, np.dtype("datetime64[D]")))


def _prepare(
    dates: Any, amounts: Any
) -> tuple[bool, np.ndarray, np.ndarray, np.ndarray]:
    scalar = np.ndim(dates) == 0 and np.ndim(amounts) == 0
    d = np.atleast_1d(_as_datetime64(dates))
    a = np.atleast_1d(np.asarray(amounts, dtype=np.float64))
    d, a = np.broadcast_arrays(d, a)

    valid = ~np.isnat(d) & np.isfinite(a)
    # Truncate toward zero, like the scalar functions.
    whole = np.where(valid, np.trunc(a), 0.0).astype(np.int64)
    return scalar, d, whole, valid


def _finish(scalar: bool, result: np.ndarray, valid: np.ndarray) -> ArrayLike:
    out = np.array(result, copy=True)
    out[~valid] = np.datetime64("NaT")
    return out[0] if scalar else out


def _split_day(d: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    day = d.astype("datetime64[D]")
    return day, d - day


def add_days(dates: Any, amounts: Any) -> ArrayLike:
    """Vectorized :func:`datekit.add_days`; NaT and NaN amounts give NaT."""
    scalar, d, n, valid = _prepare(dates, amounts)
    return _finish(scalar, d + n.astype("timedelta64[D]"), valid)


def add_months(dates: Any, amounts: Any) -> ArrayLike:
    """
    Vectorized :func:`datekit.add_months`.

    Days past the end of the target month clamp to its last day; time of
    day is kept::

        add_months(np.array(["2014-12-31", "2014-09-01"], dtype="datetime64[D]"), [2, 5])
        # → array(['2015-02-28', '2015-02-01'], dtype='datetime64[D]')
    """
    scalar, d, n, valid = _prepare(dates, amounts)
    day, time_of_day = _split_day(d)

    month = d.astype("datetime64[M]")
    day_index = (day - month.astype("datetime64[D]")).astype(np.int64)

    target = month + n.astype("timedelta64[M]")
    target_start = target.astype("datetime64[D]")
    days_in_month = ((target + 1).astype("datetime64[D]") - target_start).astype(np.int64)

    clamped = np.minimum(day_index, days_in_month - 1)
    result = target_start + clamped.astype("timedelta64[D]") + time_of_day
    return _finish(scalar, result, valid)


def add_business_days(dates: Any, amounts: Any) -> ArrayLike:
    """
    Vectorized :func:`datekit.add_business_days` on a Monday-Friday week.

    A weekend start is first rolled to the business day on the far side of
    the shift (Friday when adding, Monday when subtracting); a zero amount
    leaves it alone.
    """
    scalar, d, n, valid = _prepare(dates, amounts)
    day, time_of_day = _split_day(d)
    start = np.where(valid, day, _PLACEHOLDER_DAY)

    ahead = np.busday_offset(start, n, roll="backward")
    behind = np.busday_offset(start, n, roll="forward")
    moved = np.where(n < 0, behind, ahead)
    moved = np.where(n == 0, start, moved)
    return _finish(scalar, moved + time_of_day, valid)


def is_weekend(dates: Any) -> bool | np.ndarray:
    scalar = np.ndim(dates) == 0
    d = np.atleast_1d(_as_datetime64(dates))
    valid = ~np.isnat(d)
    day = np.where(valid, d.astype("datetime64[D]"), _PLACEHOLDER_DAY)
    result = valid & ~np.is_busday(day)
    return bool(result[0]) if scalar else result
