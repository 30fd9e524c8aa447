"""Autolock - session activity monitor with an auto-lock consumer."""

__version__ = "0.1.0"
