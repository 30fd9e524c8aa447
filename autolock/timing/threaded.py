"""Wall-clock scheduler backed by daemon threads."""

import threading
from collections.abc import Callable


class _OnceHandle:
    """One-shot timer running on a daemon thread."""

    def __init__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._fired = False
        self._cancelled = False
        self._lock = threading.Lock()
        self._timer = threading.Timer(max(delay_ms, 0) / 1000, self._run)
        self._timer.daemon = True
        self._timer.start()

    @property
    def active(self) -> bool:
        with self._lock:
            return not self._cancelled and not self._fired

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
        self._timer.cancel()

    def _run(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._fired = True
        self._callback()


class _RepeatingHandle:
    """Repeating timer paced by an Event on a daemon thread."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._interval = max(interval_ms, 1) / 1000
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    @property
    def active(self) -> bool:
        return not self._stop_event.is_set()

    def cancel(self) -> None:
        self._stop_event.set()

    def _loop(self) -> None:
        # wait() returns True once cancelled
        while not self._stop_event.wait(self._interval):
            try:
                self._callback()
            except Exception as e:
                # Keep ticking; active must stay truthful
                print(f"[Timer] Repeating callback failed: {e}")


class ThreadingScheduler:
    """Scheduler that fires callbacks on background threads in real time.

    Callbacks run on timer threads, so callers must serialize their own state.
    """

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _OnceHandle:
        return _OnceHandle(delay_ms, callback)

    def call_repeating(self, interval_ms: int, callback: Callable[[], None]) -> _RepeatingHandle:
        return _RepeatingHandle(interval_ms, callback)
