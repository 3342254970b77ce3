"""Authentication dependencies for FastAPI endpoints."""

from fastapi import Header

from blog_api.auth.jwt import verify_token
from blog_api.errors import AuthError

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthError: if the header is missing or uses another scheme
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError("Authorization token required")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError("Authorization token required")
    return token


async def get_current_username(
    authorization: str | None = Header(default=None),
) -> str:
    """
    Validate the bearer token and return the username it was issued for.

    The username is the login identifier from the credential record, which
    is what ownership checks compare against.

    Raises:
        AuthError: 401 if the token is missing, malformed, forged or expired
    """
    token = extract_bearer_token(authorization)
    username = verify_token(token)
    if username is None:
        raise AuthError("Invalid or expired token")
    return username
