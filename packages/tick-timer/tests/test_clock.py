"""Tests for the monotonic and manual time sources."""

import time

import pytest
from tick_timer.clock import ManualClock, MonotonicClock
from tick_timer.types import NS_PER_SECOND, TimeSource


class TestMonotonicClock:
    """Real elapsed-time source."""

    def test_conforms_to_protocol(self):
        """Test MonotonicClock satisfies the TimeSource protocol."""
        assert isinstance(MonotonicClock(), TimeSource)

    def test_starts_near_zero(self):
        """Test readings are measured from construction."""
        clock = MonotonicClock()
        assert 0 <= clock.now() < NS_PER_SECOND // 10

    def test_never_decreases(self):
        """Test successive readings never go down."""
        clock = MonotonicClock()
        readings = [clock.now() for _ in range(1000)]
        assert readings == sorted(readings)

    def test_sleep_blocks_for_duration(self):
        """Test sleep() blocks for about the requested time."""
        clock = MonotonicClock()
        before = clock.now()
        clock.sleep(20_000_000)
        assert clock.now() - before >= 19_000_000

    def test_non_positive_sleep_returns_immediately(self, monkeypatch):
        """Test zero or negative durations do not call time.sleep."""
        calls = []
        monkeypatch.setattr(time, "sleep", calls.append)
        clock = MonotonicClock()
        clock.sleep(0)
        clock.sleep(-5)
        assert calls == []

    def test_sleep_converts_to_seconds(self, monkeypatch):
        """Test nanoseconds are converted to seconds for time.sleep."""
        calls = []
        monkeypatch.setattr(time, "sleep", calls.append)
        MonotonicClock().sleep(250_000_000)
        assert calls == [0.25]


class TestManualClock:
    """Deterministic fake time source."""

    def test_conforms_to_protocol(self):
        """Test ManualClock satisfies the TimeSource protocol."""
        assert isinstance(ManualClock(), TimeSource)

    def test_starts_at_given_reading(self):
        """Test the clock starts at zero or the given reading."""
        assert ManualClock().now() == 0
        assert ManualClock(start=42).now() == 42

    def test_advance_seconds(self):
        """Test advance() takes seconds and returns the new reading."""
        clock = ManualClock()
        assert clock.advance(0.25) == 250_000_000
        assert clock.advance(1) == 1_250_000_000
        assert clock.now() == 1_250_000_000

    def test_advance_ns(self):
        """Test advance_ns() moves by whole nanoseconds."""
        clock = ManualClock()
        clock.advance_ns(7)
        clock.advance_ns(0)
        assert clock.now() == 7

    def test_negative_advance_raises(self):
        """Test the clock refuses to move backwards."""
        clock = ManualClock()
        with pytest.raises(ValueError, match="backwards"):
            clock.advance(-0.1)
        with pytest.raises(ValueError, match="backwards"):
            clock.advance_ns(-1)
        assert clock.now() == 0

    def test_sleep_advances_and_records(self):
        """Test sleep() advances time and records each duration."""
        clock = ManualClock()
        clock.sleep(10)
        clock.sleep(5)
        assert clock.now() == 15
        assert clock.sleeps == [10, 5]

    def test_sleep_non_positive_does_not_move(self):
        """Test non-positive sleeps are recorded but do not move time."""
        clock = ManualClock(start=100)
        clock.sleep(0)
        clock.sleep(-3)
        assert clock.now() == 100
        assert clock.sleeps == [0, -3]
