"""TickScheduler - fixed-rate update/render pacing with per-second rate capture.

Updates run on a fixed frequency: each deadline is the previous deadline
plus one period, so an update that fires slightly late does not shift the
ones after it. A caller that falls behind gets ``True`` from
``is_update_due`` once per missed period until it has caught up.

Rendering is not replayed. When the loop falls more than one frame behind,
one frame is counted and the missed deadlines are skipped.
"""

from __future__ import annotations

import logging

from tick_timer.clock import MonotonicClock
from tick_timer.config import SchedulerConfig
from tick_timer.types import (
    MAX_RATE,
    NS_PER_SECOND,
    WINDOW_PERIOD_NS,
    InvalidConfiguration,
    RateSnapshot,
    TimeSource,
)

logger = logging.getLogger(__name__)


def _period_for(field: str, rate: int) -> int:
    if isinstance(rate, bool) or not isinstance(rate, int):
        raise InvalidConfiguration(field, rate, f"{field} must be an integer, got {rate!r}")
    if rate < 0:
        raise InvalidConfiguration(field, rate, f"{field} must be non-negative, got {rate}")
    if rate > MAX_RATE:
        raise InvalidConfiguration(field, rate, f"{field} must be at most {MAX_RATE}, got {rate}")
    return NS_PER_SECOND // rate if rate else 0


def _skip_past(deadline: int, period: int, now: int) -> int:
    """Return the first deadline on the same grid that lies after ``now``."""
    if now < deadline:
        return deadline
    return deadline + ((now - deadline) // period + 1) * period


class TickScheduler:
    def __init__(
        self,
        update_rate: int,
        render_rate: int = 0,
        *,
        clock: TimeSource | None = None,
    ) -> None:
        self._update_period = _period_for("update_rate", update_rate)
        self._render_period = _period_for("render_rate", render_rate)
        self._update_rate = update_rate
        self._render_rate = render_rate
        self._clock = clock if clock is not None else MonotonicClock()

        now = self._clock.now()
        self._next_update = now + self._update_period
        self._next_render = now + self._render_period
        self._next_window_end = now + WINDOW_PERIOD_NS

        self._update_count = 0
        self._render_count = 0
        self._captured = RateSnapshot(updates=0, frames=0)

        logger.debug(
            "scheduler started: update_rate=%d render_rate=%d",
            update_rate,
            render_rate,
        )

    @classmethod
    def from_config(
        cls, config: SchedulerConfig, *, clock: TimeSource | None = None
    ) -> TickScheduler:
        return cls(config.update_rate, config.render_rate, clock=clock)

    @property
    def clock(self) -> TimeSource:
        return self._clock

    @property
    def update_rate(self) -> int:
        return self._update_rate

    @property
    def render_rate(self) -> int:
        return self._render_rate

    @property
    def update_period(self) -> int:
        return self._update_period

    @property
    def render_period(self) -> int:
        return self._render_period

    @property
    def window_period(self) -> int:
        return WINDOW_PERIOD_NS

    @property
    def updates_enabled(self) -> bool:
        return self._update_period != 0

    @property
    def render_unlimited(self) -> bool:
        return self._render_period == 0

    @property
    def next_update(self) -> int:
        return self._next_update

    @property
    def next_render(self) -> int:
        return self._next_render

    @property
    def next_window_end(self) -> int:
        return self._next_window_end

    @property
    def update_count(self) -> int:
        return self._update_count

    @property
    def render_count(self) -> int:
        return self._render_count

    @property
    def captured(self) -> RateSnapshot:
        """Update and frame counts of the last completed window."""
        return self._captured

    @property
    def captured_update_rate(self) -> int:
        return self._captured.updates

    @property
    def captured_render_rate(self) -> int:
        return self._captured.frames

    def is_update_due(self) -> bool:
        """Consume one update if its deadline has passed.

        The deadline moves forward by exactly one period per call, so a late
        caller polling in a loop replays every missed update.
        """
        if not self.updates_enabled:
            return False
        if self._clock.now() < self._next_update:
            return False
        self._update_count += 1
        self._next_update += self._update_period
        return True

    def is_render_due(self) -> bool:
        """Consume one frame if its deadline has passed, skipping missed ones."""
        if self.render_unlimited:
            self._render_count += 1
            return True

        now = self._clock.now()
        if now < self._next_render:
            return False
        self._render_count += 1
        missed = (now - self._next_render) // self._render_period
        if missed:
            logger.debug("render behind schedule, skipping %d frame(s)", missed)
        self._next_render = _skip_past(self._next_render, self._render_period, now)
        return True

    def is_window_elapsed(self) -> bool:
        """Close the one-second measurement window if it has ended.

        On the first poll past the window end the per-window counters are
        captured and reset. Whole windows that passed unobserved are skipped.
        """
        now = self._clock.now()
        if now < self._next_window_end:
            return False
        self._next_window_end = _skip_past(self._next_window_end, WINDOW_PERIOD_NS, now)
        self._captured = RateSnapshot(updates=self._update_count, frames=self._render_count)
        self._update_count = 0
        self._render_count = 0
        logger.debug(
            "window elapsed: updates=%d frames=%d",
            self._captured.updates,
            self._captured.frames,
        )
        return True

    def next_deadline(self) -> int | None:
        """Return the nearest pending deadline, or None when rendering is unlimited."""
        if self.render_unlimited:
            return None
        nearest = min(self._next_render, self._next_window_end)
        if self.updates_enabled:
            nearest = min(nearest, self._next_update)
        return nearest

    def yield_cpu(self) -> None:
        """Sleep until the next scheduled action, if nothing is pending.

        Does nothing when rendering is unlimited, and returns at once when a
        deadline has already passed. The sleep may overshoot by the host's
        scheduler granularity; deadlines are unaffected since they are derived
        from earlier deadlines, not from wake-up times.
        """
        deadline = self.next_deadline()
        if deadline is None:
            return
        now = self._clock.now()
        if now >= deadline:
            return
        self._clock.sleep(deadline - now)
