"""Session monitor configuration."""

from dataclasses import dataclass
from typing import Any

from autolock.activity.base import ActivityKind

ALL_ACTIVITY_KINDS: tuple[ActivityKind, ...] = tuple(ActivityKind)


@dataclass(frozen=True)
class MonitorConfig:
    """Timeouts for the session monitor, fixed for the monitor's lifetime."""

    total_timeout_ms: int = 0  # Last activity -> Idle; <= 0 disables
    prompt_duration_ms: int = 15000  # Warning phase before Idle
    activity_kinds: tuple[ActivityKind, ...] = ALL_ACTIVITY_KINDS

    @property
    def enabled(self) -> bool:
        """Whether the timeouts leave room for a usable warning window.

        With no activity kinds nothing could keep the session alive, so that
        counts as disabled too.
        """
        return (
            bool(self.activity_kinds)
            and self.total_timeout_ms > 0
            and self.prompt_duration_ms >= 0
            and self.total_timeout_ms > self.prompt_duration_ms
        )

    @property
    def deadline_ms(self) -> int:
        """Inactivity before the warning phase starts."""
        return self.total_timeout_ms - self.prompt_duration_ms

    @property
    def prompt_seconds(self) -> int:
        """Warning countdown start value, rounded half-up to whole seconds."""
        return (self.prompt_duration_ms + 500) // 1000

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MonitorConfig":
        """Create config from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            MonitorConfig instance.
        """
        return cls(
            total_timeout_ms=int(data.get("total_timeout_ms", 0)),
            prompt_duration_ms=int(data.get("prompt_duration_ms", 15000)),
            activity_kinds=ActivityKind.parse_many(data.get("activity_kinds")),
        )
