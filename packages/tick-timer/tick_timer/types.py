"""Shared constants, errors and protocols for the tick timer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

NS_PER_SECOND = 1_000_000_000
WINDOW_PERIOD_NS = NS_PER_SECOND
# A faster rate would truncate its period to zero nanoseconds.
MAX_RATE = NS_PER_SECOND


@dataclass(frozen=True, slots=True)
class RateSnapshot:
    updates: int
    frames: int


class InvalidConfiguration(ValueError):
    """Raised when a scheduler is constructed with an unusable rate."""

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


@runtime_checkable
class TimeSource(Protocol):
    """Monotonic time source the scheduler reads and sleeps on.

    Times are integer nanoseconds since an arbitrary epoch. ``sleep`` blocks
    the calling thread for roughly ``duration`` nanoseconds; it may
    oversleep but never waits on anything other than time.
    """

    def now(self) -> int:
        """Return elapsed nanoseconds since the source's epoch."""
        ...

    def sleep(self, duration: int) -> None:
        """Suspend the calling thread for ``duration`` nanoseconds."""
        ...
