"""PBKDF2 password hashing for the lock screen."""

import base64
import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 100_000
SALT_BYTES = 16


def hash_password(password: str, iterations: int = ITERATIONS) -> str:
    """Hash a password for storage in settings.

    Args:
        password: Plain-text password. Must not be empty.
        iterations: PBKDF2 iteration count.

    Returns:
        Encoded hash "pbkdf2_sha256$<iterations>$<salt>$<hash>".
    """
    if not password:
        raise ValueError("Password cannot be empty.")

    salt = secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return "$".join(
        [
            ALGORITHM,
            str(iterations),
            base64.b64encode(salt).decode("ascii"),
            base64.b64encode(digest).decode("ascii"),
        ]
    )


def verify_password(password: str, stored: str) -> bool:
    """Check a password against a stored hash.

    Malformed hashes never match.

    Args:
        password: Plain-text password to check.
        stored: Hash produced by hash_password().

    Returns:
        True if the password matches.
    """
    parts = stored.split("$")
    if len(parts) != 4 or parts[0] != ALGORITHM:
        return False

    try:
        iterations = int(parts[1])
        salt = base64.b64decode(parts[2], validate=True)
        expected = base64.b64decode(parts[3], validate=True)
    except ValueError:
        return False
    if iterations <= 0:
        return False

    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(digest, expected)
