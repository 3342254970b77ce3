"""Profile store."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models.user import User


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def username_taken(self, username: str, exclude: User | None = None) -> bool:
        """True if a profile other than ``exclude`` already uses ``username``."""
        query = select(User.id).where(User.username == username)
        if exclude is not None:
            query = query.where(User.id != exclude.id)
        result = await self.db.execute(query.limit(1))
        return result.first() is not None

    def add(self, user: User) -> User:
        self.db.add(user)
        return user
