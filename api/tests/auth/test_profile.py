"""
Tests for PUT /api/auth/profile endpoint.

Profile updates are partial and keyed on the username inside the bearer token.
"""

import base64
from datetime import datetime, timedelta

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.config import settings
from blog_api.models.user import Credential

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("ascii")


class TestUpdateProfileSuccess:
    async def test_update_description(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "I write about gardening."},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["description"] == "I write about gardening."
        assert data["user"]["username"] == test_user["username"]

    async def test_update_image(self, async_client: AsyncClient, test_user: dict, auth_headers):
        response = await async_client.put(
            "/api/auth/profile",
            json={"profileImageBase64": PNG_BASE64},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 200
        assert response.json()["user"]["profileImageBase64"] == PNG_BASE64

    async def test_update_image_as_data_url(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        data_url = f"data:image/png;base64,{PNG_BASE64}"
        response = await async_client.put(
            "/api/auth/profile",
            json={"profileImageBase64": data_url},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 200
        assert response.json()["user"]["profileImageBase64"] == data_url

    async def test_partial_update_keeps_other_fields(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        headers = auth_headers(test_user["token"])
        await async_client.put(
            "/api/auth/profile",
            json={"description": "First", "profileImageBase64": PNG_BASE64},
            headers=headers,
        )
        response = await async_client.put(
            "/api/auth/profile", json={"description": "Second"}, headers=headers
        )
        user = response.json()["user"]
        assert user["description"] == "Second"
        assert user["profileImageBase64"] == PNG_BASE64

    async def test_update_refreshes_updated_at(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "Hello"},
            headers=auth_headers(test_user["token"]),
        )
        user = response.json()["user"]
        assert datetime.fromisoformat(user["updatedAt"]) > datetime.fromisoformat(user["createdAt"])

    async def test_rename_changes_display_name_only(
        self,
        async_client: AsyncClient,
        db_session: AsyncSession,
        test_user: dict,
        auth_headers,
    ):
        """The login identifier on the credential record keeps the original username."""
        response = await async_client.put(
            "/api/auth/profile",
            json={"username": "renamed"},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "renamed"

        credential = (
            await db_session.execute(
                select(Credential).where(Credential.username == test_user["username"])
            )
        ).scalar_one_or_none()
        assert credential is not None

    async def test_keeping_same_username_is_not_a_conflict(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"username": test_user["username"]},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 200


class TestUpdateProfileFailure:
    async def test_requires_token(self, async_client: AsyncClient, test_user: dict):
        response = await async_client.put("/api/auth/profile", json={"description": "x"})
        assert response.status_code == 401
        assert response.json()["message"] == "Authorization token required"

    async def test_rejects_invalid_token(self, async_client: AsyncClient, test_user: dict, auth_headers):
        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "x"},
            headers=auth_headers("not-a-token"),
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_name_collision_returns_409(
        self, async_client: AsyncClient, test_user: dict, second_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"username": second_user["username"]},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 409

    async def test_rename_onto_another_login_username_returns_409(
        self, async_client: AsyncClient, test_user: dict, second_user: dict, auth_headers
    ):
        """A display name matching another account's login would give that account this profile."""
        await async_client.put(
            "/api/auth/profile",
            json={"username": "moved-away"},
            headers=auth_headers(second_user["token"]),
        )

        response = await async_client.put(
            "/api/auth/profile",
            json={"username": second_user["username"]},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 409

        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "written by the other account"},
            headers=auth_headers(second_user["token"]),
        )
        assert response.status_code == 404

    async def test_short_username_returns_400(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"username": "ab"},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 400

    async def test_long_description_returns_400(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "x" * 501},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 400

    async def test_invalid_image_returns_400(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            "/api/auth/profile",
            json={"profileImageBase64": "not base64!!"},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Profile image must be base64 encoded"

    async def test_missing_profile_returns_404(self, async_client: AsyncClient, auth_headers):
        """A valid token for a username with no profile cannot be resolved."""
        from blog_api.auth.jwt import create_access_token

        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "x"},
            headers=auth_headers(create_access_token("ghost")),
        )
        assert response.status_code == 404

    async def test_token_of_renamed_user_no_longer_resolves(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """Profiles are looked up by the token username, which a rename leaves behind."""
        headers = auth_headers(test_user["token"])
        await async_client.put("/api/auth/profile", json={"username": "renamed"}, headers=headers)

        response = await async_client.put(
            "/api/auth/profile", json={"description": "x"}, headers=headers
        )
        assert response.status_code == 404

    async def test_image_over_size_limit_returns_400(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        oversized = base64.b64encode(b"\x00" * (settings.max_profile_image_bytes + 1)).decode("ascii")
        response = await async_client.put(
            "/api/auth/profile",
            json={"profileImageBase64": oversized},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 400
        assert response.json()["message"] == (
            f"Profile image must be {settings.max_profile_image_bytes} bytes or less"
        )

    async def test_image_at_size_limit_is_accepted(
        self, async_client: AsyncClient, test_user: dict, auth_headers, monkeypatch
    ):
        monkeypatch.setattr(settings, "max_profile_image_bytes", len(PNG_BYTES))
        response = await async_client.put(
            "/api/auth/profile",
            json={"profileImageBase64": PNG_BASE64},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 200


class TestProfileTimestamps:
    async def test_reloaded_timestamps_are_utc(
        self,
        async_client: AsyncClient,
        db_session: AsyncSession,
        test_user: dict,
        auth_headers,
    ):
        db_session.expire_all()
        response = await async_client.put(
            "/api/auth/profile",
            json={"description": "Hello"},
            headers=auth_headers(test_user["token"]),
        )
        user = response.json()["user"]
        created_at = datetime.fromisoformat(user["createdAt"])
        updated_at = datetime.fromisoformat(user["updatedAt"])
        assert created_at.utcoffset() == timedelta(0)
        assert updated_at.utcoffset() == timedelta(0)
