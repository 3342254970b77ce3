"""Authentication router for registration, login and profile updates."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.auth.dependencies import get_current_username
from blog_api.config import settings
from blog_api.database import get_db
from blog_api.middleware.rate_limit import limiter
from blog_api.models.user import User
from blog_api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserOut,
)
from blog_api.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


def user_out(user: User) -> UserOut:
    return UserOut(
        username=user.username,
        description=user.description or "",
        profile_image_base64=user.profile_image_base64,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.register_rate_limit)
async def register(
    request: Request,
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Create a profile and credential record and return a bearer token."""
    user, token = await service.register(data.username, data.password)
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=user_out(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange a username and password for a bearer token.

    Unknown users and wrong passwords get the same 401 response.
    """
    user, token = await service.login(data.username, data.password)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=user_out(user),
    )


@router.put(
    "/profile",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def update_profile(
    data: UpdateProfileRequest,
    username: str = Depends(get_current_username),
    service: AuthService = Depends(get_auth_service),
) -> ProfileResponse:
    """
    Update the caller's display name, description or profile image.

    The profile is located by the username inside the token. Changing the
    display name does not change the login username.
    """
    user = await service.update_profile(
        username,
        username=data.username,
        description=data.description,
        profile_image_base64=data.profile_image_base64,
    )
    return ProfileResponse(
        message="Profile updated successfully",
        user=user_out(user),
    )
