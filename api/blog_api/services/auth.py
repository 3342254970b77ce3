"""Registration, login and profile management."""

import asyncio
import base64
import binascii
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.auth.jwt import create_access_token
from blog_api.auth.password import dummy_password_hash, hash_password, verify_password
from blog_api.config import settings
from blog_api.errors import AuthError, ConflictError, NotFoundError, ValidationError
from blog_api.models.user import Credential, User
from blog_api.repositories.credentials import CredentialRepository
from blog_api.repositories.users import UserRepository
from blog_api.schemas.auth import USERNAME_MIN_LENGTH

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class AuthService:
    """
    Credential and profile operations.

    Profiles and credentials are joined on username. The credential username
    is the login identity carried in tokens and never changes; the profile
    username is a display name that :meth:`update_profile` may change, after
    which the two no longer match.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)
        self.credentials = CredentialRepository(db)

    async def register(self, username: str, password: str) -> tuple[User, str]:
        """
        Create a profile and its credential record and issue a token.

        Both rows are written in one transaction.

        Raises:
            ConflictError: if the username is already registered
        """
        if await self.users.get_by_username(username) or await self.credentials.get_by_username(username):
            raise ConflictError("Username already exists")

        hashed_password = await asyncio.to_thread(hash_password, password)

        now = datetime.now(timezone.utc)
        user = self.users.add(
            User(username=username, description="", created_at=now, updated_at=now)
        )
        self.credentials.add(
            Credential(username=username, hashed_password=hashed_password, created_at=now, updated_at=now)
        )

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Username already exists")

        logger.info("Registered user %s", username)
        return user, create_access_token(username)

    async def login(self, username: str, password: str) -> tuple[User, str]:
        """
        Verify a username/password pair and issue a token.

        Unknown usernames and wrong passwords fail identically.

        Raises:
            AuthError: if the credentials do not match
            NotFoundError: if the credentials match but no profile has this username
        """
        credential = await self.credentials.get_by_username(username)
        if credential is None:
            await asyncio.to_thread(verify_password, password, dummy_password_hash())
            logger.info("Failed login for unknown user %s", username)
            raise AuthError(INVALID_CREDENTIALS)

        if not await asyncio.to_thread(verify_password, password, credential.hashed_password):
            logger.info("Failed login for user %s", username)
            raise AuthError(INVALID_CREDENTIALS)

        user = await self.users.get_by_username(username)
        if user is None:
            raise NotFoundError("User not found")

        return user, create_access_token(username)

    async def update_profile(
        self,
        token_username: str,
        *,
        username: str | None = None,
        description: str | None = None,
        profile_image_base64: str | None = None,
    ) -> User:
        """
        Apply a partial profile update for the user a token was issued to.

        ``None`` means "leave unchanged". An empty image string clears the
        stored image.

        Raises:
            NotFoundError: if no profile carries ``token_username``
            ValidationError: if a provided field is out of range
            ConflictError: if the new display name belongs to another profile
                or is another account's login username
        """
        user = await self.users.get_by_username(token_username)
        if user is None:
            raise NotFoundError("User not found")

        if username is not None:
            if len(username) < USERNAME_MIN_LENGTH:
                raise ValidationError(f"Username must be at least {USERNAME_MIN_LENGTH} characters long")
            if username != user.username and await self._name_taken(username, user, token_username):
                raise ConflictError("Username already exists")

        if description is not None and len(description) > settings.max_profile_description_length:
            raise ValidationError(
                f"Description must be {settings.max_profile_description_length} characters or less"
            )

        if profile_image_base64:
            _validate_image(profile_image_base64)

        if username is not None:
            user.username = username
        if description is not None:
            user.description = description
        if profile_image_base64 is not None:
            user.profile_image_base64 = profile_image_base64 or None
        user.updated_at = datetime.now(timezone.utc)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Username already exists")

        logger.info("Updated profile for %s", token_username)
        return user

    async def _name_taken(self, username: str, user: User, token_username: str) -> bool:
        # Profiles are found by login username, so a display name equal to
        # another account's login would hand that account this profile.
        if await self.users.username_taken(username, exclude=user):
            return True
        return username != token_username and await self.credentials.get_by_username(username) is not None


def _validate_image(value: str) -> None:
    """Accept plain base64 or a ``data:<mime>;base64,`` URL within the size limit."""
    payload = value
    if value.startswith("data:"):
        header, _, payload = value.partition(",")
        if not header.endswith(";base64"):
            raise ValidationError("Profile image must be base64 encoded")

    try:
        decoded = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Profile image must be base64 encoded")

    if len(decoded) > settings.max_profile_image_bytes:
        raise ValidationError(
            f"Profile image must be {settings.max_profile_image_bytes} bytes or less"
        )
