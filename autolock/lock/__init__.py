"""Auto-lock consumer of the session monitor."""

from autolock.lock.controller import LockController
from autolock.lock.password import hash_password, verify_password
from autolock.lock.settings import LockSettings

__all__ = ["LockController", "LockSettings", "hash_password", "verify_password"]
