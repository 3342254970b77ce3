"""Post store."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models.post import Post


class PostRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, post_id: UUID) -> Post | None:
        result = await self.db.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def list_published(self, offset: int, limit: int) -> list[Post]:
        """Published posts, newest first."""
        result = await self.db.execute(
            select(Post)
            .where(Post.published.is_(True))
            .order_by(Post.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_published(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Post).where(Post.published.is_(True))
        )
        return result.scalar_one()

    async def list_published_by_author(self, author: str) -> list[Post]:
        result = await self.db.execute(
            select(Post)
            .where(Post.author == author, Post.published.is_(True))
            .order_by(Post.created_at.desc())
        )
        return list(result.scalars().all())

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        """True if any post other than ``exclude_id`` already has ``slug``."""
        query = select(Post.id).where(Post.slug == slug)
        if exclude_id is not None:
            query = query.where(Post.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.first() is not None

    def add(self, post: Post) -> Post:
        self.db.add(post)
        return post

    async def delete(self, post: Post) -> None:
        await self.db.delete(post)
