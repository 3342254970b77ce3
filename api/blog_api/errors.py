"""Domain errors raised by services and translated to HTTP responses in ``blog_api.main``."""

from typing import Any

from fastapi import status


class BlogAPIError(Exception):
    """Base class for errors that map onto a client-facing status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogAPIError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(BlogAPIError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class ForbiddenError(BlogAPIError):
    """Authenticated, but not the owner of the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(BlogAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(BlogAPIError):
    """A unique field is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


def first_error_message(errors: list[dict[str, Any]]) -> str:
    """Turn the first pydantic error into a client-facing sentence."""
    if not errors:
        return "Validation error"
    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Invalid JSON format"
    if error.get("type") == "value_error":
        # Custom validators raise ValueError with a complete sentence.
        return str(error.get("ctx", {}).get("error", error.get("msg", "Validation error")))
    field = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
    msg = error.get("msg", "Validation error")
    return f"{field}: {msg}" if field else msg
