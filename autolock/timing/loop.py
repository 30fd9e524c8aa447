"""Scheduler driven by a host loop's clock."""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class _LoopTimer:
    """A timer registered with a LoopScheduler."""

    due_ms: int
    seq: int
    callback: Callable[[], None] = field(repr=False)
    interval_ms: int | None = None  # None = one-shot
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not self.cancelled and not self.fired

    def cancel(self) -> None:
        self.cancelled = True


class LoopScheduler:
    """Simulated clock whose timers fire only when the owner advances it.

    The pygame runtime advances it by the frame delta every frame, which keeps
    every callback on the event-loop thread. Tests advance it explicitly.
    """

    def __init__(self, start_ms: int = 0) -> None:
        """Initialize the scheduler.

        Args:
            start_ms: Initial clock value in milliseconds.
        """
        self._now = start_ms
        self._seq = 0
        self._timers: list[_LoopTimer] = []

    @property
    def now_ms(self) -> int:
        """Current simulated time in milliseconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of timers that can still fire."""
        return sum(1 for t in self._timers if t.active)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _LoopTimer:
        return self._add(self._now + max(delay_ms, 0), callback, None)

    def call_repeating(self, interval_ms: int, callback: Callable[[], None]) -> _LoopTimer:
        interval = max(interval_ms, 1)
        return self._add(self._now + interval, callback, interval)

    def advance(self, delta_ms: int) -> None:
        """Move the clock forward, firing every timer that falls due.

        Timers fire in due-time order with the clock set to each due time, so
        callbacks observe the exact instant they were scheduled for.

        Args:
            delta_ms: Milliseconds to advance. Must not be negative.
        """
        if delta_ms < 0:
            raise ValueError(f"Cannot advance clock backwards: {delta_ms}")

        target = self._now + delta_ms
        while True:
            due = [t for t in self._timers if t.active and t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self._now = timer.due_ms
            if timer.interval_ms is None:
                timer.fired = True
            else:
                timer.due_ms += timer.interval_ms
            timer.callback()

        self._now = target
        self._timers = [t for t in self._timers if t.active]

    def _add(
        self, due_ms: int, callback: Callable[[], None], interval_ms: int | None
    ) -> _LoopTimer:
        self._seq += 1
        timer = _LoopTimer(due_ms=due_ms, seq=self._seq, callback=callback, interval_ms=interval_ms)
        # Only live timers are kept
        self._timers = [t for t in self._timers if t.active]
        self._timers.append(timer)
        return timer
