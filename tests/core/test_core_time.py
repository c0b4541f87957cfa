"""
Tests for core.time - Clock protocol and timestamp formatting.
"""

import pytest
from datetime import datetime, timezone, timedelta

from core.time.clock import FixedClock, SystemClock, format_timestamp


class TestSystemClock:
    def test_returns_utc_datetime(self):
        dt = SystemClock().now_utc()
        assert dt.tzinfo == timezone.utc

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now_utc()
        t2 = clock.now_utc()
        assert t2 >= t1


class TestFixedClock:
    def test_returns_fixed_time(self):
        fixed = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        assert clock.now_utc() == fixed
        assert clock.now_utc() == fixed

    def test_requires_aware_datetime(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedClock(datetime(2025, 6, 15, 12, 0, 0))

    def test_advance(self):
        fixed = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        clock.advance(90)
        assert clock.now_utc() == fixed + timedelta(seconds=90)


class TestFormatTimestamp:
    def test_utc_iso_second_precision(self):
        dt = datetime(2025, 6, 15, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(dt) == "2025-06-15T12:00:00+00:00"

    def test_converts_offset_to_utc(self):
        eat = timezone(timedelta(hours=3))
        dt = datetime(2025, 6, 15, 15, 30, 0, tzinfo=eat)
        assert format_timestamp(dt) == "2025-06-15T12:30:00+00:00"

    def test_rejects_naive(self):
        with pytest.raises(ValueError):
            format_timestamp(datetime(2025, 6, 15))
