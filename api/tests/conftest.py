"""
Shared test fixtures for the blog API tests.

Provides database session management, test clients, and user fixtures.
"""

import os

# Fast hashing, a known secret and an in-memory database for the whole test run.
# Must be set before blog_api.config is imported.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_api.auth.jwt import create_access_token
from blog_api.auth.password import hash_password
from blog_api.config import settings
from blog_api.database import Base, get_db
from blog_api.main import app
from blog_api.middleware.rate_limit import reset_limiter

# Import models so they're registered with Base.metadata before table creation
from blog_api.models.user import Credential, User


# --- Rate Limiter Reset Fixture ---


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Reset rate limiter before each test to ensure test isolation."""
    reset_limiter()
    yield


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Fresh in-memory database per test function.

    StaticPool keeps the single SQLite connection alive so every session in
    the test sees the same tables.
    """
    engine = create_async_engine(
        settings.test_database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client configured for testing.
    Overrides database dependency with test session.
    """

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
    ) as client:
        yield client

    app.dependency_overrides.clear()


# --- Authentication Helper Fixtures ---


@pytest.fixture
def auth_headers():
    """Factory fixture for creating bearer Authorization headers."""

    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def valid_registration_data() -> dict[str, str]:
    """Valid user registration payload."""
    return {
        "username": "newuser",
        "password": "secret123",
    }


# --- User Fixtures ---


async def _create_user(
    db_session: AsyncSession,
    username: str,
    password: str,
) -> dict[str, Any]:
    """Helper to create a profile and credential record directly in the database."""
    now = datetime.now(timezone.utc)
    db_session.add(User(username=username, description="", created_at=now, updated_at=now))
    db_session.add(
        Credential(
            username=username,
            hashed_password=hash_password(password),
            created_at=now,
            updated_at=now,
        )
    )
    await db_session.commit()

    return {
        "username": username,
        "password": password,
        "token": create_access_token(username),
    }


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> dict[str, Any]:
    """
    Create a standard test user.

    Returns dict with username, plaintext password and a bearer token.
    """
    return await _create_user(db_session, username="testuser", password="testpass123")


@pytest_asyncio.fixture
async def second_user(db_session: AsyncSession) -> dict[str, Any]:
    """Create a second user for testing ownership/authorization scenarios."""
    return await _create_user(db_session, username="seconduser", password="secondpass123")


# --- Post Fixtures ---


@pytest.fixture
def create_post(
    async_client: AsyncClient, auth_headers
) -> Callable[..., Awaitable[dict[str, Any]]]:
    """
    Factory fixture that creates a post through the API and returns its JSON.

    Usage:
        post = await create_post(test_user["token"], title="Hello", published=True)
    """

    async def _create_post(token: str, **fields: Any) -> dict[str, Any]:
        payload = {"title": "A Post", "content": "Some content."}
        payload.update(fields)
        response = await async_client.post(
            "/api/posts",
            json=payload,
            headers=auth_headers(token),
        )
        assert response.status_code == 201, response.text
        return response.json()["post"]

    return _create_post


@pytest.fixture
def frozen_time():
    """
    Fixture for time-based testing using freezegun.

    Usage:
        with frozen_time("2026-02-01 12:00:00"):
            # time is frozen
    """
    from freezegun import freeze_time

    return freeze_time
