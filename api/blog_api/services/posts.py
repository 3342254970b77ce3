"""Post CRUD with ownership checks and slug uniqueness."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import ValidationError as SchemaError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.errors import ForbiddenError, NotFoundError, ValidationError, first_error_message
from blog_api.models.post import Post
from blog_api.repositories.posts import PostRepository
from blog_api.schemas.posts import CreatePostRequest, UpdatePostRequest
from blog_api.services.slugs import ensure_unique_slug, slugify

logger = logging.getLogger(__name__)


def parse_post_id(post_id: str) -> UUID:
    """
    Parse a post identifier from a path segment.

    Raises:
        ValidationError: if ``post_id`` is not a UUID
    """
    try:
        return UUID(post_id)
    except (ValueError, AttributeError, TypeError):
        raise ValidationError("Invalid post ID")


class PostService:
    """
    Post operations.

    Write operations take the username a bearer token was issued for; the
    caller is responsible for verifying the token first.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.posts = PostRepository(db)

    async def list_published(self, page: int = 1, page_size: int = 10) -> tuple[list[Post], int]:
        """Return one page of published posts (newest first) and the total number published."""
        if page < 1 or page_size < 1:
            raise ValidationError("Page and limit must be positive integers")
        offset = (page - 1) * page_size
        posts = await self.posts.list_published(offset, page_size)
        total = await self.posts.count_published()
        return posts, total

    async def list_by_author(self, username: str) -> list[Post]:
        """Published posts by ``username``, newest first. Drafts are never included."""
        return await self.posts.list_published_by_author(username)

    async def get_by_id(self, post_id: str) -> Post:
        """
        Fetch a published post.

        A draft is reported exactly like a missing post.
        """
        post = await self.posts.get(parse_post_id(post_id))
        if post is None or not post.published:
            raise NotFoundError("Post not found")
        return post

    async def create(self, author: str, data: CreatePostRequest) -> Post:
        title = data.title.strip()
        slug = await ensure_unique_slug(self.posts, slugify(title))

        now = datetime.now(timezone.utc)
        post = self.posts.add(
            Post(
                title=title,
                description=(data.description or "").strip(),
                content=data.content.strip(),
                author=author,
                slug=slug,
                published=data.published,
                created_at=now,
                updated_at=now,
            )
        )
        await self.db.commit()

        logger.info("Post %s created by %s with slug %s", post.id, author, slug)
        return post

    async def update(self, username: str, post_id: str, changes: dict[str, Any]) -> Post:
        """
        Apply a partial update. Only the author may update a post.

        ``changes`` is the raw request body. It is validated only after the
        id, existence and ownership checks pass, so a non-author always gets
        403. A changed title regenerates the slug; the post's own slug does
        not count as a collision.
        """
        post = await self._get_owned(username, post_id, "edit")
        try:
            data = UpdatePostRequest.model_validate(changes)
        except SchemaError as exc:
            raise ValidationError(first_error_message(exc.errors()))

        if data.title is not None:
            title = data.title.strip()
            if title != post.title:
                post.slug = await ensure_unique_slug(self.posts, slugify(title), exclude_id=post.id)
            post.title = title
        if data.description is not None:
            post.description = data.description.strip()
        if data.content is not None:
            post.content = data.content.strip()
        if data.published is not None:
            post.published = data.published
        post.updated_at = datetime.now(timezone.utc)

        await self.db.commit()

        logger.info("Post %s updated by %s", post.id, username)
        return post

    async def delete(self, username: str, post_id: str) -> None:
        """Permanently remove a post. Only the author may delete it."""
        post = await self._get_owned(username, post_id, "delete")
        await self.posts.delete(post)
        await self.db.commit()

        logger.info("Post %s deleted by %s", post_id, username)

    async def _get_owned(self, username: str, post_id: str, action: str) -> Post:
        post = await self.posts.get(parse_post_id(post_id))
        if post is None:
            raise NotFoundError("Post not found")
        if post.author != username:
            raise ForbiddenError(f"Not authorized to {action} this post")
        return post
