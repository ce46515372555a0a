"""
datekit.arrays
~~~~~~~~~~~~~~

NumPy ``datetime64`` versions of the day, month and business-day
arithmetic.  Arrays are accepted everywhere a scalar is; amounts broadcast
against dates and NaT propagates::

    import numpy as np
    from datekit.arrays import add_business_days

    starts = np.array(["2014-09-01", "2014-09-06", "NaT"], dtype="datetime64[D]")
    add_business_days(starts, 10)
    # → array(['2014-09-15', '2014-09-19', 'NaT'], dtype='datetime64[D]')
"""

from __future__ import annotations

from datekit.arrays.arrays import add_business_days, add_days, add_months, is_weekend

__all__ = [
    "add_business_days",
    "add_days",
    "add_months",
    "is_weekend",
]
