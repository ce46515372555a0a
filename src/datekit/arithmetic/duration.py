from __future__ import annotations

from typing import Any, Mapping, TypedDict

from datekit.core import construct_from, to_date, to_number

from .arithmetic import MILLISECONDS_IN_SECOND, add_days, add_milliseconds, add_months

DURATION_FIELDS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")


class Duration(TypedDict, total=False):
    years: float
    months: float
    weeks: float
    days: float
    hours: float
    minutes: float
    seconds: float


def _fields(duration: Mapping[str, Any]) -> dict[str, int | float]:
    if not isinstance(duration, Mapping):
        raise TypeError(f"duration must be a mapping; got {type(duration).__name__}.")
    return {name: to_number(duration.get(name, 0)) for name in DURATION_FIELDS}


def add(date: Any, duration: Mapping[str, Any]) -> Any:
    """
    Add a multi-unit duration to ``date``.

    Units are applied in a fixed order: years and months first, then weeks
    and days, then hours, minutes and seconds as elapsed time.  A stage whose
    combined amount is zero is skipped, so ``add(d, {}) == d``.

    Example::

        add(datetime(2014, 9, 1, 10, 19, 50), {
            "years": 2, "months": 9, "weeks": 1, "days": 7,
            "hours": 5, "minutes": 9, "seconds": 30,
        })
        # → 2017-06-15 15:29:20
    """
    f = _fields(duration)
    result = to_date(date)

    months = f["months"] + f["years"] * 12
    if months:
        result = add_months(result, months)

    days = f["days"] + f["weeks"] * 7
    if days:
        result = add_days(result, days)

    milliseconds = (f["seconds"] + (f["minutes"] + f["hours"] * 60) * 60) * MILLISECONDS_IN_SECOND
    if milliseconds:
        result = add_milliseconds(result, milliseconds)

    return construct_from(date, result)


def sub(date: Any, duration: Mapping[str, Any]) -> Any:
    """Subtract a multi-unit duration; the mirror image of :func:`add`."""
    return add(date, {name: -amount for name, amount in _fields(duration).items()})
