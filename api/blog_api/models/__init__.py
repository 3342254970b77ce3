"""Database models for the blog API."""

from blog_api.models.post import Post
from blog_api.models.user import Credential, User

__all__ = [
    "User",
    "Credential",
    "Post",
]
