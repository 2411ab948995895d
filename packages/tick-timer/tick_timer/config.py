"""Scheduler configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_RATE = 30


@dataclass(frozen=True)
class SchedulerConfig:
    """Immutable rate settings for a TickScheduler.

    Attributes:
        update_rate: Simulation steps per second. 0 disables updates.
        render_rate: Frames per second. 0 renders on every poll.
    """

    update_rate: int = DEFAULT_RATE
    render_rate: int = DEFAULT_RATE
