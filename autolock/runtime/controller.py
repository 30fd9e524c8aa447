"""Runtime controller that drives the session monitor from a pygame loop."""

import os
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any

import pygame
import yaml
from dotenv import load_dotenv

from autolock.activity.pygame_source import PygameActivitySource
from autolock.idle.monitor import IdleMonitor
from autolock.idle.state import SessionPhase
from autolock.lock.controller import LockController
from autolock.lock.settings import LockSettings
from autolock.timing.loop import LoopScheduler

PASSWORD_HASH_ENV = "AUTOLOCK_PASSWORD_HASH"


class RuntimeState(Enum):
    """Runtime controller states."""

    STARTING = auto()
    RUNNING = auto()
    LOCKED = auto()
    STOPPING = auto()


@dataclass
class WindowConfig:
    """Window configuration."""

    resolution: tuple[int, int] = (640, 360)
    fps: int = 30
    background: tuple[int, int, int] = (45, 45, 45)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WindowConfig":
        """Create from dictionary."""
        res = data.get("resolution", [640, 360])
        bg = data.get("background", [45, 45, 45])
        return cls(
            resolution=(int(res[0]), int(res[1])) if res else (640, 360),
            fps=int(data.get("fps", 30)),
            background=(int(bg[0]), int(bg[1]), int(bg[2])) if bg else (45, 45, 45),
        )


# Indicator colors per session phase
_PHASE_COLORS = {
    SessionPhase.ACTIVE: (0, 200, 0),  # Green
    SessionPhase.PROMPTING: (200, 200, 0),  # Yellow
    SessionPhase.IDLE: (200, 0, 0),  # Red
}


class RuntimeController:
    """Wires activity source, monitor and lock controller into one loop.

    The pygame frame clock advances a LoopScheduler, so timer callbacks and
    activity pulses are all handled on the loop thread, one at a time.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the runtime controller.

        Args:
            config_path: Path to configuration YAML file.
        """
        load_dotenv()

        self.config = self._load_config(config_path)
        self._state = RuntimeState.STARTING
        self._running = False

        self.settings = LockSettings.from_dict(self.config.get("lock", {}))
        env_hash = os.environ.get(PASSWORD_HASH_ENV)
        if env_hash:
            self.settings.password_hash = env_hash
        self.window = WindowConfig.from_dict(self.config.get("window", {}))

        self.scheduler = LoopScheduler()
        self.activity = PygameActivitySource()

        # Initialized in build()
        self._monitor: IdleMonitor | None = None
        self._lock: LockController | None = None

        self._password_input = ""

        # Pygame state
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None

    @property
    def state(self) -> RuntimeState:
        return self._state

    @property
    def monitor(self) -> IdleMonitor | None:
        return self._monitor

    @property
    def lock(self) -> LockController | None:
        return self._lock

    def _load_config(self, config_path: Path | None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file.

        Returns:
            Configuration dictionary.
        """
        if config_path is None:
            config_path = Path("config/default.yaml")

        if config_path.exists():
            with open(config_path) as f:
                loaded: dict[str, Any] = yaml.safe_load(f) or {}
                return loaded

        # Return minimal default config
        return {
            "lock": {"auto_lock_timeout": 0, "prompt_duration": 15},
            "window": {"resolution": [640, 360], "fps": 30},
        }

    def build(self) -> None:
        """Create the monitor and lock controller (no display needed)."""
        self._monitor = IdleMonitor(
            self.settings.monitor_config(),
            self.scheduler,
            activity_source=self.activity,
        )
        self._lock = LockController(self._monitor, self.settings, on_lock=self._on_lock)
        self._state = RuntimeState.RUNNING

        if not self.settings.auto_lock_enabled:
            print("[Runtime] Auto-lock is off (set a password and a timeout to enable it)")

    def start(self) -> None:
        """Open the window and run the main loop until quit."""
        self._state = RuntimeState.STARTING
        self._running = True

        pygame.init()
        pygame.display.set_caption("Autolock")
        self._screen = pygame.display.set_mode(self.window.resolution)
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 28)

        self.build()
        print("[Runtime] Started. Press ESC to quit.")

        self._main_loop()

    def stop(self) -> None:
        """Tear down monitor and window."""
        self._state = RuntimeState.STOPPING
        self._running = False

        if self._lock is not None:
            self._lock.close()
        if self._monitor is not None:
            self._monitor.stop()

        if self._screen is not None:
            pygame.quit()
            self._screen = None

        print("[Runtime] Stopped.")

    def _main_loop(self) -> None:
        """Main event/render loop."""
        while self._running and self._clock is not None:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    self._running = False
                    break

            self.step(self._clock.tick(self.window.fps))
            self.render()

        self.stop()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one pygame event.

        Args:
            event: Pygame event.

        Returns:
            True if should continue running, False to quit.
        """
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False

        if self._lock is not None and self._lock.locked and event.type == pygame.KEYDOWN:
            self._handle_password_key(event)

        self.activity.handle_event(event)
        return True

    def step(self, delta_ms: int) -> None:
        """Advance timers by one frame.

        Args:
            delta_ms: Milliseconds since the previous frame.
        """
        self.scheduler.advance(delta_ms)
        if self._lock is not None and self._state != RuntimeState.STOPPING:
            self._state = RuntimeState.LOCKED if self._lock.locked else RuntimeState.RUNNING

    def render(self) -> None:
        """Render the current frame."""
        if self._screen is None or self._monitor is None or self._lock is None:
            return

        self._screen.fill(self.window.background)

        lines: list[str] = []
        if self._lock.locked:
            lines.append("Locked. Type your password and press Enter.")
            lines.append("*" * len(self._password_input))
            if self._lock.error:
                lines.append(self._lock.error)
            if self._lock.password_hint:
                lines.append(f"Hint: {self._lock.password_hint}")
        elif self._lock.warning_visible:
            lines.append(f"Locking in {self._lock.countdown} s. Move or press a key to stay.")
        else:
            lines.append(f"Session: {self._monitor.state}")

        if self._font is not None:
            y = 40
            for line in lines:
                surface = self._font.render(line, True, (230, 230, 230))
                self._screen.blit(surface, (40, y))
                y += 36

        self._draw_state_indicator()
        pygame.display.flip()

    def _draw_state_indicator(self) -> None:
        """Draw a small indicator showing the session phase."""
        if self._screen is None or self._monitor is None:
            return

        color = _PHASE_COLORS.get(self._monitor.state.phase, (100, 100, 100))
        pygame.draw.circle(
            self._screen,
            color,
            (self.window.resolution[0] - 20, self.window.resolution[1] - 20),
            10,
        )

    def _handle_password_key(self, event: pygame.event.Event) -> None:
        """Edit or submit the unlock password.

        Args:
            event: KEYDOWN event while locked.
        """
        if self._lock is None:
            return

        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._lock.unlock(self._password_input)
            self._password_input = ""
        elif event.key == pygame.K_BACKSPACE:
            self._password_input = self._password_input[:-1]
        elif event.unicode and event.unicode.isprintable():
            self._password_input += event.unicode

    def _on_lock(self) -> None:
        """Clear any half-typed password when the session locks."""
        self._password_input = ""
        self._state = RuntimeState.LOCKED
