from __future__ import annotations

from typing import Any

from datekit._exceptions import InvalidTimeValueError
from datekit.core import NaT, to_date

FORMATS = ("extended", "basic")
REPRESENTATIONS = ("complete", "date", "time")


def add_leading_zeros(number: int, target_length: int) -> str:
    sign = "-" if number < 0 else ""
    return sign + str(abs(number)).rjust(target_length, "0")


def format_iso9075(
    date: Any,
    *,
    format: str = "extended",
    representation: str = "complete",
) -> str:
    """
    Format ``date`` as ISO 9075 (the MySQL / SQL date-time layout).

    ``format`` is ``"extended"`` (``2019-09-18 19:00:52``) or ``"basic"``
    (``20190918 190052``); ``representation`` selects the ``"complete"``
    value, only the ``"date"`` or only the ``"time"``.

    :raises InvalidTimeValueError: ``date`` is invalid.
    :raises ValueError: unknown ``format`` or ``representation``.
    """
    if format not in FORMATS:
        raise ValueError(f"format must be one of {FORMATS}; got {format!r}.")
    if representation not in REPRESENTATIONS:
        raise ValueError(f"representation must be one of {REPRESENTATIONS}; got {representation!r}.")

    value = to_date(date)
    if value is NaT:
        raise InvalidTimeValueError()

    date_delimiter = "-" if format == "extended" else ""
    time_delimiter = ":" if format == "extended" else ""

    parts = []
    if representation != "time":
        parts.append(date_delimiter.join([
            add_leading_zeros(value.year, 4),
            add_leading_zeros(value.month, 2),
            add_leading_zeros(value.day, 2),
        ]))
    if representation != "date":
        parts.append(time_delimiter.join([
            add_leading_zeros(value.hour, 2),
            add_leading_zeros(value.minute, 2),
            add_leading_zeros(value.second, 2),
        ]))
    return " ".join(parts)
