"""Unit tests for the system clock."""

from datetime import datetime, timedelta, timezone

from taarafo.adapter.clock import SystemClock


def test_system_clock_returns_current_utc_time():
    before = datetime.now(timezone.utc)
    now = SystemClock().get_current_time()

    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert before <= now <= datetime.now(timezone.utc)
