"""URL slug derivation and uniqueness probing for post titles."""

import re
import secrets
from uuid import UUID

from blog_api.config import settings
from blog_api.errors import ConflictError
from blog_api.repositories.posts import PostRepository

# Base slug used when a title has no slug-safe characters at all.
FALLBACK_SLUG = "post"
RANDOM_SUFFIX_ATTEMPTS = 3

# ASCII word characters only, but any Unicode whitespace counts as a separator.
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(title: str) -> str:
    """
    Derive a URL-safe base slug from a title.

    Lowercases and trims, drops anything but ASCII letters, digits,
    whitespace, underscores and hyphens, then collapses separator runs into
    single hyphens and strips hyphens from both ends. A title that leaves
    nothing behind yields :data:`FALLBACK_SLUG`.
    """
    slug = title.lower().strip()
    slug = _UNSAFE_CHARS.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    slug = slug.strip("-")
    return slug or FALLBACK_SLUG


async def ensure_unique_slug(
    posts: PostRepository,
    base_slug: str,
    exclude_id: UUID | None = None,
    max_attempts: int | None = None,
) -> str:
    """
    Return the first unused slug among ``base``, ``base-1``, ``base-2``, ...

    ``exclude_id`` lets a post keep its own slug when it is being updated.
    Probing stops after ``max_attempts`` candidates and switches to a random
    hex suffix.

    There is no store-level unique constraint behind this check, so two
    concurrent requests for the same base slug can both win.
    """
    if max_attempts is None:
        max_attempts = settings.slug_max_attempts

    for counter in range(max_attempts):
        candidate = base_slug if counter == 0 else f"{base_slug}-{counter}"
        if not await posts.slug_exists(candidate, exclude_id):
            return candidate

    for _ in range(RANDOM_SUFFIX_ATTEMPTS):
        candidate = f"{base_slug}-{secrets.token_hex(4)}"
        if not await posts.slug_exists(candidate, exclude_id):
            return candidate

    raise ConflictError("Could not generate a unique slug for this title")
