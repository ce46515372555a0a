from __future__ import annotations

import math
from typing import Any

from datekit.core import NaT, to_date, to_instant


def compare_asc(left: Any, right: Any) -> int | float:
    """
    -1 if ``left`` is before ``right``, 1 if after, 0 if equal; NaN if either
    is invalid.  Sort with ``sorted(dates, key=functools.cmp_to_key(compare_asc))``.

    Naive values are read as system local time so they compare with aware ones.
    """
    a, b = to_date(left), to_date(right)
    if a is NaT or b is NaT:
        return math.nan
    a, b = to_instant(a), to_instant(b)
    return (a > b) - (a < b)


def compare_desc(left: Any, right: Any) -> int | float:
    """Reverse-chronological counterpart of :func:`compare_asc`."""
    result = compare_asc(left, right)
    return result if math.isnan(result) else -result
