"""JWT bearer token creation and validation."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from blog_api.config import settings


def create_access_token(username: str) -> str:
    """Create a bearer token bound to ``username``, valid for ``token_expire_days`` (7 by default)."""
    issued_at = datetime.now(timezone.utc)
    payload = {
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.token_expire_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a JWT token.

    Returns the payload if valid, None if invalid or expired.
    """
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.JWTError:
        return None


def verify_token(token: str) -> str | None:
    """Return the username carried by a valid token, or None when it cannot be trusted."""
    payload = decode_token(token)
    if not payload:
        return None
    username = payload.get("username")
    if not isinstance(username, str) or not username:
        return None
    return username
