"""tick-timer - Fixed-rate update/render scheduling for interactive loops."""

from tick_timer.clock import ManualClock, MonotonicClock
from tick_timer.config import DEFAULT_RATE, SchedulerConfig
from tick_timer.scheduler import TickScheduler
from tick_timer.types import (
    MAX_RATE,
    NS_PER_SECOND,
    WINDOW_PERIOD_NS,
    InvalidConfiguration,
    RateSnapshot,
    TimeSource,
)

__all__ = [
    "TickScheduler",
    "SchedulerConfig",
    "MonotonicClock",
    "ManualClock",
    "TimeSource",
    "RateSnapshot",
    "InvalidConfiguration",
    "DEFAULT_RATE",
    "MAX_RATE",
    "NS_PER_SECOND",
    "WINDOW_PERIOD_NS",
]
