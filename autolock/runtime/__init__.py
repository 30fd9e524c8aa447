"""Pygame runtime hosting the session monitor."""

from autolock.runtime.controller import RuntimeController, RuntimeState, WindowConfig

__all__ = ["RuntimeController", "RuntimeState", "WindowConfig"]
