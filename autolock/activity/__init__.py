"""Activity event sources feeding the session monitor."""

from autolock.activity.base import ActivityHub, ActivityKind, ActivityListener, ActivitySource
from autolock.activity.pygame_source import PygameActivitySource

__all__ = [
    "ActivityHub",
    "ActivityKind",
    "ActivityListener",
    "ActivitySource",
    "PygameActivitySource",
]
