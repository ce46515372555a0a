from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Mapping, Union

import numpy as np

from .nat import NaT, NaTType

logger = logging.getLogger(__name__)

# The engine's working value: a datetime, or NaT for an invalid date.
DateTimeOrNaT = Union[datetime, NaTType]

NormalizeFn = Callable[[Any], DateTimeOrNaT]
ConstructFn = Callable[[Any, DateTimeOrNaT], Any]


@dataclass(frozen=True, slots=True)
class DateKind:
    """How one family of date-like values maps to and from ``datetime``."""

    normalize: NormalizeFn
    construct: ConstructFn


class KindRegistry:
    """
    Type -> DateKind lookup.

    Lookup walks the MRO of the value's type, so subclasses of a registered
    type (e.g. a ``datetime`` subclass) share its kind unless they register
    one of their own.
    """

    def __init__(self, kinds: Mapping[type, DateKind]) -> None:
        self._kinds: dict[type, DateKind] = dict(kinds)

    def register(self, cls: type, kind: DateKind) -> None:
        self._kinds[cls] = kind

    def lookup(self, cls: type) -> DateKind | None:
        for base in cls.__mro__:
            kind = self._kinds.get(base)
            if kind is not None:
                return kind
        return None


# ── datetime / date ──────────────────────────────────────────────────────────

def _rebuild(cls: type, value: DateTimeOrNaT) -> Any:
    if value is NaT or type(value) is cls:
        return value
    return cls(
        value.year, value.month, value.day,
        value.hour, value.minute, value.second, value.microsecond,
        tzinfo=value.tzinfo, fold=value.fold,
    )


def _normalize_datetime(value: datetime) -> DateTimeOrNaT:
    return value


def _construct_datetime(reference: datetime, value: DateTimeOrNaT) -> Any:
    return _rebuild(type(reference), value)


def _normalize_date(value: date) -> DateTimeOrNaT:
    return datetime.combine(value, time())


def _construct_plain(reference: Any, value: DateTimeOrNaT) -> DateTimeOrNaT:
    return _rebuild(datetime, value)


# ── millisecond timestamps ──────────────────────────────────────────────────

def _normalize_timestamp(value: Any) -> DateTimeOrNaT:
    if isinstance(value, bool):
        return NaT
    ms = to_amount(value)
    if ms is None:
        return NaT
    seconds, millis = divmod(ms, 1000)
    try:
        # replace() keeps the fold fromtimestamp sets on a repeated hour.
        return datetime.fromtimestamp(seconds).replace(microsecond=millis * 1000)
    except (OverflowError, OSError, ValueError):
        logger.debug("Timestamp %r is outside the representable range.", value)
        return NaT


# ── numpy.datetime64 ────────────────────────────────────────────────────────

def _normalize_datetime64(value: np.datetime64) -> DateTimeOrNaT:
    if np.isnat(value):
        return NaT
    result = value.astype("datetime64[us]").item()
    if not isinstance(result, datetime):
        logger.debug("datetime64 %r is outside the datetime range.", value)
        return NaT
    return result


def _construct_datetime64(reference: np.datetime64, value: DateTimeOrNaT) -> np.datetime64:
    unit, _ = np.datetime_data(reference.dtype)
    if value is NaT:
        return np.datetime64("NaT", unit)
    if unit == "generic":
        unit = "us"
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return np.datetime64(value, "us").astype(f"datetime64[{unit}]")


# ── NaT ─────────────────────────────────────────────────────────────────────

def _normalize_nat(value: NaTType) -> DateTimeOrNaT:
    return NaT


kinds = KindRegistry({
    datetime: DateKind(_normalize_datetime, _construct_datetime),
    date: DateKind(_normalize_date, _construct_plain),
    np.datetime64: DateKind(_normalize_datetime64, _construct_datetime64),
    NaTType: DateKind(_normalize_nat, _construct_plain),
})


def register_kind(cls: type, kind: DateKind) -> None:
    kinds.register(cls, kind)


def to_date(value: Any) -> DateTimeOrNaT:
    """
    Normalize a date-like value to a ``datetime``.

    Accepts datetimes (returned as-is), dates (midnight), millisecond
    timestamps, ``numpy.datetime64`` scalars and any registered kind.
    Everything else, including NaN timestamps, becomes NaT.
    """
    kind = kinds.lookup(type(value))
    if kind is not None:
        return kind.normalize(value)
    if isinstance(value, numbers.Real):
        return _normalize_timestamp(value)
    logger.debug("Cannot normalize %r to a date.", type(value).__name__)
    return NaT


def construct_from(reference: Any, value: Any) -> Any:
    """
    Build a date of the same kind as ``reference`` holding ``value``.

    ``value`` may be anything :func:`to_date` accepts.  Timestamps and
    unknown references produce a plain ``datetime``.

    A ``numpy.datetime64`` reference keeps its unit, so the result is
    truncated to it: with a ``datetime64[D]`` reference anything below a
    whole day is dropped, and ``add_hours(np.datetime64("2014-09-01"), 12)``
    gives back the same day.  Use a finer unit to keep time of day.
    """
    kind = kinds.lookup(type(reference))
    construct = kind.construct if kind is not None else _construct_plain
    return construct(reference, to_date(value))


def is_date(value: Any) -> bool:
    return value is NaT or isinstance(value, (date, np.datetime64))


def is_valid(value: Any) -> bool:
    return to_date(value) is not NaT


# ── amounts ─────────────────────────────────────────────────────────────────

def to_number(value: Any) -> int | float:
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    return math.nan


def to_amount(value: Any) -> int | None:
    """Whole-unit amount, truncated toward zero; None when not a finite number."""
    number = to_number(value)
    if isinstance(number, int):
        return number
    if not math.isfinite(number):
        return None
    return math.trunc(number)


# ── wall clock helpers ──────────────────────────────────────────────────────

def resolve_wall_time(value: datetime) -> datetime:
    """
    Settle an aware wall time on a real instant.

    Wall times inside a DST gap move forward by the size of the gap, the
    way a local-time calendar resolves them.  Naive values are unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).astimezone(value.tzinfo)


def to_instant(value: datetime) -> datetime:
    """Aware view of ``value``; naive values are read as system local time."""
    if value.tzinfo is None:
        return value.astimezone()
    return value
