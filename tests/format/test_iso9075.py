from __future__ import annotations

import math
from datetime import datetime

import numpy as np
import pytest

from datekit import InvalidTimeValueError, NaT
from datekit.format import add_leading_zeros, format_iso9075

SAMPLE = datetime(2019, 9, 18, 19, 0, 52)


def test_add_leading_zeros() -> None:
    assert add_leading_zeros(7, 2) == "07"
    assert add_leading_zeros(2019, 2) == "2019"
    assert add_leading_zeros(-7, 3) == "-007"


def test_extended_complete() -> None:
    assert format_iso9075(SAMPLE) == "2019-09-18 19:00:52"


def test_basic_complete() -> None:
    assert format_iso9075(SAMPLE, format="basic") == "20190918 190052"


def test_date_only() -> None:
    assert format_iso9075(SAMPLE, representation="date") == "2019-09-18"
    assert format_iso9075(SAMPLE, format="basic", representation="date") == "20190918"


def test_time_only() -> None:
    assert format_iso9075(SAMPLE, representation="time") == "19:00:52"
    assert format_iso9075(SAMPLE, format="basic", representation="time") == "190052"


def test_pads_small_years() -> None:
    assert format_iso9075(datetime(5, 1, 2, 3, 4, 5)) == "0005-01-02 03:04:05"


def test_accepts_timestamp_and_datetime64() -> None:
    assert format_iso9075(SAMPLE.timestamp() * 1000) == "2019-09-18 19:00:52"
    assert format_iso9075(np.datetime64("2019-09-18T19:00:52")) == "2019-09-18 19:00:52"


@pytest.mark.parametrize("value", [NaT, math.nan, np.datetime64("NaT"), "2019-09-18"])
def test_invalid_date_raises(value) -> None:
    with pytest.raises(InvalidTimeValueError, match="Invalid time value"):
        format_iso9075(value)


def test_unknown_options_raise() -> None:
    with pytest.raises(ValueError):
        format_iso9075(SAMPLE, format="short")
    with pytest.raises(ValueError):
        format_iso9075(SAMPLE, representation="datetime")
