"""Authentication and profile schemas for request/response validation."""

from pydantic import Field, field_validator

from blog_api.schemas.common import APIModel, MessageResponse, UTCDateTime

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


class RegisterRequest(APIModel):
    """User registration request schema."""

    username: str
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not v:
            raise ValueError("Username and password are required")
        if len(v) < USERNAME_MIN_LENGTH:
            raise ValueError(f"Username must be at least {USERNAME_MIN_LENGTH} characters long")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Username and password are required")
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
        return v


class LoginRequest(APIModel):
    """User login request schema."""

    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def validate_present(cls, v: str) -> str:
        if not v:
            raise ValueError("Username and password are required")
        return v


class UpdateProfileRequest(APIModel):
    """
    Partial profile update.

    Omitted fields are left untouched. Length and image checks happen in
    the auth service so that they apply to every caller.
    """

    username: str | None = None
    description: str | None = None
    profile_image_base64: str | None = Field(default=None, alias="profileImageBase64")


class UserOut(APIModel):
    """Public view of a profile. Never includes the password hash."""

    username: str
    description: str = ""
    profile_image_base64: str | None = Field(default=None, alias="profileImageBase64")
    created_at: UTCDateTime = Field(alias="createdAt")
    updated_at: UTCDateTime = Field(alias="updatedAt")


class AuthResponse(MessageResponse):
    """Response for register and login."""

    token: str
    user: UserOut


class ProfileResponse(MessageResponse):
    """Response for a profile update."""

    user: UserOut
