"""Base protocol definitions for timer schedulers."""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Handle to a scheduled one-shot or repeating timer."""

    @property
    def active(self) -> bool:
        """Whether the timer can still fire."""
        ...

    def cancel(self) -> None:
        """Cancel the timer. Cancelling twice is a no-op."""
        ...


class Scheduler(Protocol):
    """Protocol for schedule-once / schedule-repeating timer sources."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run a callback once after a delay.

        Args:
            delay_ms: Delay in milliseconds.
            callback: Function to call.

        Returns:
            Handle that can cancel the timer.
        """
        ...

    def call_repeating(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run a callback every interval until cancelled.

        Args:
            interval_ms: Interval in milliseconds.
            callback: Function to call.

        Returns:
            Handle that can cancel the timer.
        """
        ...
