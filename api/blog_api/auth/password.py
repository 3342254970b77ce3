"""Password hashing with bcrypt."""

from functools import lru_cache

import bcrypt

from blog_api.config import settings

# bcrypt only reads the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt at the configured cost factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("ascii")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash. Malformed hashes never verify."""
    try:
        return bcrypt.checkpw(_encode(password), hashed_password.encode("ascii"))
    except ValueError:
        return False


@lru_cache
def dummy_password_hash() -> str:
    """
    Hash checked when a login names an unknown user.

    Uses the same cost factor as real hashes so that an unknown username and
    a wrong password take the same time to reject.
    """
    return hash_password("not-a-real-password")
