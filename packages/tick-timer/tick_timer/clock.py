"""Time sources: the real monotonic clock and a manual clock for tests."""

from __future__ import annotations

import time

from tick_timer.types import NS_PER_SECOND


class MonotonicClock:
    """Elapsed time since construction, read from ``time.monotonic_ns``."""

    def __init__(self) -> None:
        self._start = time.monotonic_ns()

    def now(self) -> int:
        return time.monotonic_ns() - self._start

    def sleep(self, duration: int) -> None:
        if duration > 0:
            time.sleep(duration / NS_PER_SECOND)


class ManualClock:
    """Deterministic time source that only moves when told to.

    Conforms to the TimeSource protocol. ``sleep`` returns immediately after
    advancing the clock by the requested duration, so code that sleeps until
    a deadline lands exactly on it.

    Args:
        start: Initial reading in nanoseconds (default 0).
    """

    def __init__(self, start: int = 0) -> None:
        self._now = start
        self.sleeps: list[int] = []

    def now(self) -> int:
        return self._now

    def advance(self, seconds: float) -> int:
        """Move the clock forward by ``seconds`` and return the new reading."""
        return self.advance_ns(round(seconds * NS_PER_SECOND))

    def advance_ns(self, duration: int) -> int:
        if duration < 0:
            raise ValueError("cannot move a clock backwards")
        self._now += duration
        return self._now

    def sleep(self, duration: int) -> None:
        self.sleeps.append(duration)
        if duration > 0:
            self._now += duration
