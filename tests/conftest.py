"""Shared test fixtures."""

import os

import pytest

from autolock.activity.base import ActivityHub
from autolock.idle.config import MonitorConfig
from autolock.idle.monitor import IdleMonitor
from autolock.timing.loop import LoopScheduler

# Headless pygame for runtime tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def scheduler() -> LoopScheduler:
    """Create a simulated clock starting at t=0."""
    return LoopScheduler()


@pytest.fixture
def hub() -> ActivityHub:
    """Create an in-process activity source."""
    return ActivityHub()


@pytest.fixture
def monitor_config() -> MonitorConfig:
    """20 s total timeout with a 5 s warning."""
    return MonitorConfig(total_timeout_ms=20000, prompt_duration_ms=5000)


@pytest.fixture
def monitor(monitor_config: MonitorConfig, scheduler: LoopScheduler, hub: ActivityHub):
    """Create a monitor on the simulated clock, torn down after the test."""
    m = IdleMonitor(monitor_config, scheduler, activity_source=hub)
    yield m
    m.stop()
