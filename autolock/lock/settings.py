"""Auto-lock settings."""

from dataclasses import dataclass
from typing import Any

from autolock.activity.base import ActivityKind
from autolock.idle.config import ALL_ACTIVITY_KINDS, MonitorConfig


@dataclass
class LockSettings:
    """User-facing auto-lock preferences."""

    auto_lock_timeout: int = 0  # seconds, 0 = never
    prompt_duration: int = 15  # seconds of warning before locking
    password_hash: str | None = None
    password_hint: str | None = None
    activity_kinds: tuple[ActivityKind, ...] = ALL_ACTIVITY_KINDS

    @property
    def auto_lock_enabled(self) -> bool:
        """Auto-lock only applies once a password is set and the timeouts are valid."""
        return self.monitor_config().enabled

    def monitor_config(self) -> MonitorConfig:
        """Build the session monitor config for these settings.

        Without a password the timeout is zeroed, which disables monitoring.

        Returns:
            MonitorConfig in milliseconds.
        """
        total = self.auto_lock_timeout * 1000 if self.password_hash else 0
        return MonitorConfig(
            total_timeout_ms=total,
            prompt_duration_ms=self.prompt_duration * 1000,
            activity_kinds=self.activity_kinds,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LockSettings":
        """Create settings from dictionary.

        Args:
            data: Settings dictionary.

        Returns:
            LockSettings instance.
        """
        password_hash = data.get("password_hash")
        password_hint = data.get("password_hint")
        return cls(
            auto_lock_timeout=int(data.get("auto_lock_timeout", 0)),
            prompt_duration=int(data.get("prompt_duration", 15)),
            password_hash=str(password_hash) if password_hash else None,
            password_hint=str(password_hint) if password_hint else None,
            activity_kinds=ActivityKind.parse_many(data.get("activity_kinds")),
        )
