"""Timer scheduling for the session monitor."""

from autolock.timing.base import Scheduler, TimerHandle
from autolock.timing.loop import LoopScheduler
from autolock.timing.threaded import ThreadingScheduler

__all__ = ["Scheduler", "TimerHandle", "LoopScheduler", "ThreadingScheduler"]
