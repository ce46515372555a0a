"""
Library-wide defaults.

Functions that take an optional ``week_starts_on`` fall back to the value
held here when the caller passes ``None``::

    import datekit

    datekit.set_default_options(week_starts_on=1)   # weeks start on Monday
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


def _check_week_starts_on(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ValueError(f"week_starts_on must be an integer between 0 and 6; got {value!r}.")
    return value


@dataclass(frozen=True, slots=True)
class DefaultOptions:
    # 0 = Sunday ... 6 = Saturday
    week_starts_on: int = 0

    def __post_init__(self) -> None:
        _check_week_starts_on(self.week_starts_on)


_defaults = DefaultOptions()


def get_default_options() -> DefaultOptions:
    return _defaults


def set_default_options(**changes: Any) -> DefaultOptions:
    """Replace the library defaults; unknown keys raise ``TypeError``."""
    global _defaults
    _defaults = dataclasses.replace(_defaults, **changes)
    return _defaults


def resolve_week_starts_on(week_starts_on: int | None) -> int:
    if week_starts_on is None:
        return _defaults.week_starts_on
    return _check_week_starts_on(week_starts_on)
