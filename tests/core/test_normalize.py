"""
tests/core/test_normalize.py

Covers:
  - to_date for every accepted kind
  - construct_from preserving the reference's kind
  - Custom kinds via register_kind
  - is_date / is_valid
  - Amount coercion and truncation
"""

import math
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from datekit.core import (
    DateKind,
    NaT,
    construct_from,
    is_date,
    is_valid,
    register_kind,
    to_amount,
    to_date,
)


class MyDateTime(datetime):
    """A caller-defined datetime subclass."""


class Stamp:
    """A foreign date type holding UTC epoch milliseconds."""

    def __init__(self, ms):
        self.ms = ms


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

register_kind(
    Stamp,
    DateKind(
        normalize=lambda s: _EPOCH + timedelta(milliseconds=s.ms),
        construct=lambda ref, v: NaT if v is NaT else Stamp((v - _EPOCH) // timedelta(milliseconds=1)),
    ),
)


# ── to_date ───────────────────────────────────────────────────────────────────

class TestToDate:

    def test_datetime_passes_through(self):
        d = datetime(2014, 9, 1, 10, 30)
        assert to_date(d) is d

    def test_date_becomes_midnight(self):
        assert to_date(date(2014, 9, 1)) == datetime(2014, 9, 1)

    def test_timestamp_is_local_time(self):
        d = datetime(2014, 9, 1, 12, 30, 15, 250000)
        assert to_date(d.timestamp() * 1000) == d

    def test_fractional_timestamp_truncates(self):
        d = datetime(2014, 9, 1, 12, 30)
        ms = int(d.timestamp()) * 1000
        assert to_date(ms + 0.9) == d

    def test_datetime64(self):
        assert to_date(np.datetime64("2014-09-01T10:00")) == datetime(2014, 9, 1, 10, 0)

    def test_datetime64_nat(self):
        assert to_date(np.datetime64("NaT")) is NaT

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 1e300, 10**400])
    def test_bad_timestamps(self, value):
        assert to_date(value) is NaT

    @pytest.mark.parametrize("value", ["2014-09-01", None, {}, [], True])
    def test_unsupported_values(self, value):
        assert to_date(value) is NaT

    def test_nat(self):
        assert to_date(NaT) is NaT


# ── construct_from ────────────────────────────────────────────────────────────

class TestConstructFrom:

    def test_subclass_is_preserved(self):
        ref = MyDateTime(2014, 9, 1)
        result = construct_from(ref, datetime(2015, 2, 1, 8))
        assert type(result) is MyDateTime
        assert result == datetime(2015, 2, 1, 8)

    def test_timezone_is_carried(self):
        value = datetime(2015, 2, 1, tzinfo=timezone.utc)
        assert construct_from(datetime(2014, 9, 1), value).tzinfo is timezone.utc

    def test_timestamp_reference_gives_datetime(self):
        result = construct_from(0, datetime(2015, 2, 1))
        assert type(result) is datetime

    def test_timestamp_value(self):
        d = datetime(2014, 9, 1)
        assert construct_from(d, d.timestamp() * 1000) == d

    def test_datetime64_keeps_unit(self):
        result = construct_from(np.datetime64("2014-09-01"), datetime(2015, 2, 1))
        assert result == np.datetime64("2015-02-01")
        assert result.dtype == np.dtype("datetime64[D]")

    def test_datetime64_nat(self):
        result = construct_from(np.datetime64("2014-09-01T00:00:00.000"), NaT)
        assert np.isnat(result)
        assert result.dtype == np.dtype("datetime64[ms]")

    def test_aware_value_into_datetime64_is_utc(self):
        value = datetime(2015, 2, 1, 12, tzinfo=timezone(timedelta(hours=2)))
        result = construct_from(np.datetime64("2014-09-01T00:00", "s"), value)
        assert result == np.datetime64("2015-02-01T10:00:00")

    def test_nat_value_gives_nat(self):
        assert construct_from(datetime(2014, 9, 1), math.nan) is NaT

    def test_nat_reference_gives_datetime(self):
        assert construct_from(NaT, datetime(2014, 9, 1)) == datetime(2014, 9, 1)

    def test_registered_kind(self):
        result = construct_from(Stamp(0), datetime(1970, 1, 2, tzinfo=timezone.utc))
        assert isinstance(result, Stamp)
        assert result.ms == 86_400_000

    def test_registered_kind_normalizes(self):
        assert to_date(Stamp(1000)) == datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


# ── predicates ────────────────────────────────────────────────────────────────

class TestPredicates:

    @pytest.mark.parametrize("value", [
        datetime.now(), date.today(), np.datetime64("2014-09-01"), NaT,
    ])
    def test_is_date_true(self, value):
        assert is_date(value)

    @pytest.mark.parametrize("value", [
        datetime.now().timestamp() * 1000, "2014-09-01", {}, None, 0,
    ])
    def test_is_date_false(self, value):
        assert not is_date(value)

    def test_is_valid(self):
        assert is_valid(datetime(2014, 9, 1))
        assert is_valid(0)
        assert not is_valid(NaT)
        assert not is_valid(math.nan)
        assert not is_valid(np.datetime64("NaT"))


# ── amounts ───────────────────────────────────────────────────────────────────

class TestAmount:

    def test_integers_pass_through(self):
        assert to_amount(5) == 5
        assert to_amount(np.int64(-3)) == -3

    def test_positive_fraction_floors(self):
        assert to_amount(2.9) == 2

    def test_negative_fraction_ceils(self):
        assert to_amount(-2.9) == -2

    @pytest.mark.parametrize("value", [math.nan, math.inf, "5", None, object()])
    def test_invalid_amounts(self, value):
        assert to_amount(value) is None
