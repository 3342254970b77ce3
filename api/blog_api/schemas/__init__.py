"""Pydantic schemas for request/response validation."""

from blog_api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserOut,
)
from blog_api.schemas.common import MessageResponse
from blog_api.schemas.posts import (
    CreatePostRequest,
    PostOut,
    PostResponse,
    PostsListResponse,
    UpdatePostRequest,
)

__all__ = [
    "MessageResponse",
    "RegisterRequest",
    "LoginRequest",
    "UpdateProfileRequest",
    "UserOut",
    "AuthResponse",
    "ProfileResponse",
    "CreatePostRequest",
    "UpdatePostRequest",
    "PostOut",
    "PostResponse",
    "PostsListResponse",
]
