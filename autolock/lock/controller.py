"""Lock controller reacting to session monitor transitions."""

from collections.abc import Callable

from autolock.idle.monitor import IdleMonitor
from autolock.idle.state import SessionState
from autolock.lock.password import verify_password
from autolock.lock.settings import LockSettings

INCORRECT_PASSWORD = "Incorrect password"
EMPTY_PASSWORD = "Password cannot be empty."


class LockController:
    """Shows the auto-lock warning and locks the session when idle.

    The lock is sticky: activity after locking resets the monitor but only a
    correct password clears the lock.
    """

    def __init__(
        self,
        monitor: IdleMonitor,
        settings: LockSettings,
        on_lock: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the controller and start listening to the monitor.

        Args:
            monitor: Session monitor to follow.
            settings: Auto-lock settings holding the password hash.
            on_lock: Optional callback fired once each time the session locks.
        """
        self._monitor = monitor
        self._settings = settings
        self._on_lock = on_lock
        self._locked = False
        self.error: str | None = None

        monitor.add_listener(self._on_state_change)

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def warning_visible(self) -> bool:
        """Whether the "about to lock" warning should be shown."""
        return not self._locked and self._monitor.state.is_prompting

    @property
    def countdown(self) -> int | None:
        """Seconds left before locking while the warning is visible."""
        if not self.warning_visible:
            return None
        return self._monitor.remaining_seconds

    @property
    def password_hint(self) -> str | None:
        return self._settings.password_hint

    def stay_signed_in(self) -> None:
        """Dismiss the warning and restart the inactivity timeout."""
        self._monitor.notify_activity()

    def lock(self) -> None:
        """Lock the session now."""
        if self._locked:
            return
        self._locked = True
        self.error = None
        print("[Lock] Session locked")
        if self._on_lock is not None:
            self._on_lock()

    def unlock(self, password: str) -> bool:
        """Try to unlock the session.

        Args:
            password: Password typed by the user.

        Returns:
            True if the session is unlocked afterwards.
        """
        if not self._locked:
            return True

        if not password:
            self.error = EMPTY_PASSWORD
            return False

        password_hash = self._settings.password_hash
        if password_hash and not verify_password(password, password_hash):
            self.error = INCORRECT_PASSWORD
            return False

        self._locked = False
        self.error = None
        print("[Lock] Session unlocked")
        self._monitor.notify_activity()
        return True

    def close(self) -> None:
        """Stop following the monitor."""
        self._monitor.remove_listener(self._on_state_change)

    def _on_state_change(self, state: SessionState) -> None:
        """Handle monitor transitions.

        Args:
            state: New session state.
        """
        if state.is_idle and self._settings.password_hash:
            self.lock()
