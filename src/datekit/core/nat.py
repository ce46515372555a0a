from __future__ import annotations

import math
from typing import Any

from datekit._exceptions import InvalidTimeValueError


class NaTType:
    """
    Not-a-Time: the invalid date sentinel for the ``datetime`` kind.

    Behaves like a NaN timestamp: it is unequal to everything (itself
    included) and any arithmetic on it yields NaT again.  Use ``x is NaT`` or
    :func:`datekit.is_valid` to test for it.
    """

    _instance: NaTType | None = None

    def __new__(cls) -> NaTType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> tuple[Any, ...]:
        return (NaTType, ())

    def __repr__(self) -> str:
        return "NaT"

    def __str__(self) -> str:
        return "Invalid Date"

    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    def __hash__(self) -> int:
        return hash("NaT")

    def timestamp(self) -> float:
        return math.nan

    def isoformat(self, *args: Any, **kwargs: Any) -> str:
        raise InvalidTimeValueError()


NaT = NaTType()
