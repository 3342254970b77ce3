"""Services for the blog API."""

from blog_api.services.auth import AuthService
from blog_api.services.posts import PostService
from blog_api.services.slugs import ensure_unique_slug, slugify

__all__ = ["AuthService", "PostService", "ensure_unique_slug", "slugify"]
