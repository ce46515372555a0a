"""The one place datekit reads the wall clock; patch ``clock.now`` in tests."""

from __future__ import annotations

from datetime import datetime


def now() -> datetime:
    return datetime.now()
