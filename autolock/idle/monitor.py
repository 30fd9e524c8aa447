"""Session activity monitor: Active -> Prompting -> Idle."""

import threading
from collections.abc import Callable
from functools import partial
from types import TracebackType

from autolock.activity.base import ActivityKind, ActivitySource
from autolock.idle.config import MonitorConfig
from autolock.idle.state import SessionState
from autolock.timing.base import Scheduler, TimerHandle

StateListener = Callable[[SessionState], None]


class IdleMonitor:
    """Tracks user activity and times the session out after inactivity.

    While Active a one-shot deadline timer is armed; when it fires the monitor
    starts Prompting and arms a one-second countdown interval; when the
    countdown runs out the monitor goes Idle with no timer armed. Any activity
    pulse cancels whatever is armed and starts over from Active.

    A disabled config never arms a timer and never leaves Active.
    """

    COUNTDOWN_INTERVAL_MS = 1000

    def __init__(
        self,
        config: MonitorConfig,
        scheduler: Scheduler,
        activity_source: ActivitySource | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        """Create the monitor and arm it.

        Args:
            config: Timeouts for this monitor.
            scheduler: Timer source.
            activity_source: Optional source of activity pulses to subscribe to.
            on_state_change: Optional listener for state transitions.
        """
        self.config = config
        self._scheduler = scheduler
        self._source = activity_source
        self._state = SessionState.active()
        self._deadline: TimerHandle | None = None
        self._countdown: TimerHandle | None = None
        self._listeners: list[StateListener] = []
        self._subscribed = False
        self._closed = False

        # Bumped whenever armed timers are cancelled; stale callbacks check it
        self._generation = 0

        # Re-entrant: listeners may call back into notify_activity()
        self._lock = threading.RLock()

        if on_state_change is not None:
            self._listeners.append(on_state_change)

        if not config.enabled:
            print(
                f"[Idle] Monitoring disabled (total={config.total_timeout_ms}ms, "
                f"prompt={config.prompt_duration_ms}ms)"
            )
            return

        if self._source is not None:
            self._source.subscribe(self._on_activity)
            self._subscribed = True

        with self._lock:
            self._reset()

    @property
    def state(self) -> SessionState:
        """Get current session state."""
        with self._lock:
            return self._state

    @property
    def remaining_seconds(self) -> int | None:
        """Countdown value while prompting, else None."""
        with self._lock:
            return self._state.remaining_seconds

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscribed(self) -> bool:
        """Whether the monitor currently listens to its activity source."""
        return self._subscribed

    @property
    def deadline_armed(self) -> bool:
        with self._lock:
            return self._deadline is not None and self._deadline.active

    @property
    def countdown_armed(self) -> bool:
        with self._lock:
            return self._countdown is not None and self._countdown.active

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback for state transitions.

        Args:
            listener: Called with the new state after every transition.
        """
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        """Unregister a state callback. Unknown listeners are ignored.

        Args:
            listener: Callback passed to add_listener().
        """
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def notify_activity(self) -> None:
        """Record an activity pulse.

        Returns the monitor to Active with a fresh deadline from any state,
        including Idle. Does nothing once the monitor is stopped.
        """
        with self._lock:
            if self._closed:
                return
            self._reset()

    def stop(self) -> None:
        """Tear down: cancel timers and release the activity source.

        Safe to call from any state and more than once.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._cancel_timers()
            if self._subscribed and self._source is not None:
                self._source.unsubscribe(self._on_activity)
                self._subscribed = False

    def __enter__(self) -> "IdleMonitor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def _on_activity(self, kind: ActivityKind) -> None:
        """Handle a pulse from the activity source.

        Args:
            kind: Kind of interaction.
        """
        if kind in self.config.activity_kinds:
            self.notify_activity()

    def _reset(self) -> None:
        """Cancel armed timers, go Active and re-arm the deadline."""
        self._cancel_timers()
        if self.config.enabled:
            self._deadline = self._scheduler.call_later(
                self.config.deadline_ms,
                partial(self._on_deadline, self._generation),
            )
        self._set_state(SessionState.active())

    def _cancel_timers(self) -> None:
        self._generation += 1
        if self._deadline is not None:
            self._deadline.cancel()
            self._deadline = None
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _on_deadline(self, generation: int) -> None:
        """Deadline timer fired: start the warning countdown.

        Args:
            generation: Generation the timer was armed in.
        """
        with self._lock:
            if generation != self._generation or self._closed or not self._state.is_active:
                return
            self._deadline = None

            seconds = self.config.prompt_seconds
            if seconds <= 0:
                # Nothing to count down
                self._set_state(SessionState.idle())
                return

            self._countdown = self._scheduler.call_repeating(
                self.COUNTDOWN_INTERVAL_MS,
                partial(self._on_tick, generation),
            )
            self._set_state(SessionState.prompting(seconds))

    def _on_tick(self, generation: int) -> None:
        """Countdown interval ticked.

        Args:
            generation: Generation the interval was armed in.
        """
        with self._lock:
            if generation != self._generation or self._closed or not self._state.is_prompting:
                return

            remaining = (self._state.remaining_seconds or 0) - 1
            if remaining <= 0:
                if self._countdown is not None:
                    self._countdown.cancel()
                    self._countdown = None
                self._set_state(SessionState.idle())
            else:
                self._set_state(SessionState.prompting(remaining))

    def _set_state(self, new_state: SessionState) -> None:
        """Update state and notify listeners.

        Called last in every transition so a listener that re-enters
        notify_activity() sees a consistent monitor. A failing listener
        never stops the countdown or the remaining listeners.

        Args:
            new_state: New session state.
        """
        if self._state == new_state:
            return

        self._state = new_state
        for listener in list(self._listeners):
            if self._state is not new_state:
                # A listener already moved the monitor on; stale for the rest
                return
            try:
                listener(new_state)
            except Exception as e:
                print(f"[Idle] State listener failed on {new_state}: {e}")
