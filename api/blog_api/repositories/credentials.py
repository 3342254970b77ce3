"""Credential store."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models.user import Credential


class CredentialRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(self, username: str) -> Credential | None:
        result = await self.db.execute(select(Credential).where(Credential.username == username))
        return result.scalar_one_or_none()

    def add(self, credential: Credential) -> Credential:
        self.db.add(credential)
        return credential
