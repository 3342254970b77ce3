"""Post schemas for request/response validation."""

from pydantic import Field, field_validator

from blog_api.models.post import CONTENT_MAX_LENGTH, DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from blog_api.schemas.common import APIModel, MessageResponse, UTCDateTime


def _check_title(v: str) -> str:
    if not v.strip():
        raise ValueError("Title is required")
    if len(v) > TITLE_MAX_LENGTH:
        raise ValueError(f"Title must be {TITLE_MAX_LENGTH} characters or less")
    return v


def _check_description(v: str) -> str:
    if len(v) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Description must be {DESCRIPTION_MAX_LENGTH} characters or less")
    return v


def _check_content(v: str) -> str:
    if not v.strip():
        raise ValueError("Content is required")
    if len(v) > CONTENT_MAX_LENGTH:
        raise ValueError(f"Content must be {CONTENT_MAX_LENGTH:,} characters or less")
    return v


class CreatePostRequest(APIModel):
    """Request to create a new post."""

    title: str
    description: str | None = None
    content: str
    published: bool = False

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _check_title(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _check_description(v) if v is not None else v

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return _check_content(v)


class UpdatePostRequest(APIModel):
    """Partial post update. Only fields present in the body are applied."""

    title: str | None = None
    description: str | None = None
    content: str | None = None
    published: bool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return _check_title(v) if v is not None else v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _check_description(v) if v is not None else v

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str | None) -> str | None:
        return _check_content(v) if v is not None else v


class PostOut(APIModel):
    """Serialized post."""

    id: str = Field(alias="_id")
    title: str
    description: str
    content: str
    author: str
    slug: str
    published: bool
    created_at: UTCDateTime = Field(alias="createdAt")
    updated_at: UTCDateTime = Field(alias="updatedAt")


class PostResponse(MessageResponse):
    """Single-post envelope."""

    post: PostOut


class PostsListResponse(MessageResponse):
    """Post list envelope. ``total`` counts every matching post, not just this page."""

    posts: list[PostOut]
    total: int
