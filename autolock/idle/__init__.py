"""Session activity monitor."""

from autolock.idle.config import MonitorConfig
from autolock.idle.monitor import IdleMonitor
from autolock.idle.state import SessionPhase, SessionState

__all__ = ["IdleMonitor", "MonitorConfig", "SessionPhase", "SessionState"]
