"""Integration tests for the activity -> monitor -> lock pipeline."""

import pygame
import pytest

from autolock.activity.pygame_source import PygameActivitySource
from autolock.idle.config import MonitorConfig
from autolock.idle.monitor import IdleMonitor
from autolock.idle.state import SessionState
from autolock.lock.controller import LockController
from autolock.lock.password import hash_password
from autolock.lock.settings import LockSettings
from autolock.timing.loop import LoopScheduler


def run_frames(scheduler: LoopScheduler, until_ms: int, frame_ms: int = 16) -> None:
    """Advance the clock in frame-sized steps like the runtime loop does."""
    while scheduler.now_ms < until_ms:
        scheduler.advance(min(frame_ms, until_ms - scheduler.now_ms))


@pytest.mark.integration
class TestSessionTimeline:
    """End-to-end timeline of the 20 s / 5 s configuration."""

    def test_timeline_with_reset(self):
        scheduler = LoopScheduler()
        source = PygameActivitySource()
        history: list[tuple[int, SessionState]] = []
        monitor = IdleMonitor(
            MonitorConfig(total_timeout_ms=20000, prompt_duration_ms=5000),
            scheduler,
            activity_source=source,
            on_state_change=lambda s: history.append((scheduler.now_ms, s)),
        )

        run_frames(scheduler, 16500)
        assert history == [
            (15000, SessionState.prompting(5)),
            (16000, SessionState.prompting(4)),
        ]

        source.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN))
        assert monitor.state.is_active

        run_frames(scheduler, 40000)
        assert (31500, SessionState.prompting(5)) in history
        assert (36500, SessionState.idle()) in history
        assert monitor.state.is_idle

        monitor.stop()
        assert scheduler.pending == 0
        assert source.listener_count == 0


@pytest.mark.integration
class TestAutoLockFlow:
    """Auto-lock settings through to an unlocked session."""

    def test_lock_cycle(self):
        settings = LockSettings(
            auto_lock_timeout=30,
            prompt_duration=15,
            password_hash=hash_password("letmein", iterations=1000),
        )
        scheduler = LoopScheduler()
        source = PygameActivitySource()
        monitor = IdleMonitor(settings.monitor_config(), scheduler, activity_source=source)
        lock = LockController(monitor, settings)

        run_frames(scheduler, 15000)
        assert lock.warning_visible
        assert lock.countdown == 15

        # User moves the mouse during the warning
        source.handle_event(pygame.event.Event(pygame.MOUSEMOTION))
        assert not lock.warning_visible

        run_frames(scheduler, 45000)
        assert lock.locked

        assert not lock.unlock("wrong")
        assert lock.unlock("letmein")
        assert monitor.state.is_active

        lock.close()
        monitor.stop()
        assert scheduler.pending == 0
