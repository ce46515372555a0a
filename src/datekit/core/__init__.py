"""
datekit.core
~~~~~~~~~~~~

Normalization of date-like values.  Every datekit function accepts a
``datetime`` (or subclass), a ``date``, a millisecond timestamp or a
``numpy.datetime64`` and hands back a value of the same kind::

    from datekit.core import construct_from, to_date

    to_date(1409529600000)                      # → datetime in local time
    construct_from(np.datetime64("2014-09-01"), datetime(2015, 2, 1))
                                                # → numpy.datetime64('2015-02-01')

Invalid input never raises; it normalizes to ``NaT``.

Public API
----------
NaT, NaTType      Invalid date sentinel.
to_date           Normalize to datetime (or NaT).
construct_from    Build a value of the reference's kind.
DateKind          Normalize/construct pair for one family of date values.
register_kind     Plug in another date implementation.
is_date, is_valid Predicates.
to_amount         Amount coercion shared by the arithmetic functions.
clock             Wall clock access for the now-relative helpers.
"""

from __future__ import annotations

from datekit.core import clock
from datekit.core.nat import NaT, NaTType
from datekit.core.normalize import (
    DateKind,
    DateTimeOrNaT,
    construct_from,
    is_date,
    is_valid,
    register_kind,
    resolve_wall_time,
    to_amount,
    to_date,
    to_instant,
    to_number,
)

__all__ = [
    "NaT",
    "NaTType",
    "DateKind",
    "DateTimeOrNaT",
    "clock",
    "construct_from",
    "is_date",
    "is_valid",
    "register_kind",
    "resolve_wall_time",
    "to_amount",
    "to_date",
    "to_instant",
    "to_number",
]
