"""Session states reported by the monitor."""

from dataclasses import dataclass
from enum import Enum, auto


class SessionPhase(Enum):
    """Session monitor state machine phases."""

    ACTIVE = auto()  # Recent activity, no warning
    PROMPTING = auto()  # Countdown running before Idle
    IDLE = auto()  # Timed out


@dataclass(frozen=True)
class SessionState:
    """Current phase plus the countdown value while prompting."""

    phase: SessionPhase
    remaining_seconds: int | None = None

    @classmethod
    def active(cls) -> "SessionState":
        return cls(SessionPhase.ACTIVE)

    @classmethod
    def prompting(cls, remaining_seconds: int) -> "SessionState":
        return cls(SessionPhase.PROMPTING, max(remaining_seconds, 0))

    @classmethod
    def idle(cls) -> "SessionState":
        return cls(SessionPhase.IDLE)

    @property
    def is_active(self) -> bool:
        return self.phase == SessionPhase.ACTIVE

    @property
    def is_prompting(self) -> bool:
        return self.phase == SessionPhase.PROMPTING

    @property
    def is_idle(self) -> bool:
        return self.phase == SessionPhase.IDLE

    def __str__(self) -> str:
        if self.is_prompting:
            return f"Prompting({self.remaining_seconds})"
        return self.phase.name.capitalize()
