"""Posts router: public reads and author-only writes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.auth.dependencies import get_current_username
from blog_api.database import get_db
from blog_api.models.post import Post
from blog_api.schemas.common import MessageResponse
from blog_api.schemas.posts import (
    CreatePostRequest,
    PostOut,
    PostResponse,
    PostsListResponse,
)
from blog_api.services.posts import PostService

router = APIRouter(prefix="/api/posts", tags=["Posts"])

MAX_PAGE_SIZE = 100


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


def post_out(post: Post) -> PostOut:
    return PostOut(
        id=str(post.id),
        title=post.title,
        description=post.description or "",
        content=post.content,
        author=post.author,
        slug=post.slug,
        published=post.published,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


# --- Public reads ---


@router.get(
    "",
    response_model=PostsListResponse,
    status_code=status.HTTP_200_OK,
)
async def list_posts(
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE, description="Posts per page"),
    service: PostService = Depends(get_post_service),
) -> PostsListResponse:
    """
    List published posts, newest first.

    ``total`` is the number of published posts overall, not the page size.
    """
    posts, total = await service.list_published(page, limit)
    return PostsListResponse(
        message="Posts retrieved successfully",
        posts=[post_out(post) for post in posts],
        total=total,
    )


@router.get(
    "/user/{username}",
    response_model=PostsListResponse,
    status_code=status.HTTP_200_OK,
)
async def list_user_posts(
    username: str,
    service: PostService = Depends(get_post_service),
) -> PostsListResponse:
    """List one author's published posts, newest first."""
    posts = await service.list_by_author(username)
    return PostsListResponse(
        message=f"Posts by {username} retrieved successfully",
        posts=[post_out(post) for post in posts],
        total=len(posts),
    )


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
)
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a single published post. Drafts are reported as not found."""
    post = await service.get_by_id(post_id)
    return PostResponse(
        message="Post retrieved successfully",
        post=post_out(post),
    )


# --- Author writes ---


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    data: CreatePostRequest,
    username: str = Depends(get_current_username),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post authored by the token's user. Posts are drafts unless ``published`` is true."""
    post = await service.create(username, data)
    return PostResponse(
        message="Post created successfully",
        post=post_out(post),
    )


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
)
async def update_post(
    post_id: str,
    changes: dict[str, Any] = Body(..., description="Any of title, description, content, published"),
    username: str = Depends(get_current_username),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Update a post.

    Only the post author can update their post. Ownership is checked before
    the fields are validated.
    """
    post = await service.update(username, post_id, changes)
    return PostResponse(
        message="Post updated successfully",
        post=post_out(post),
    )


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_post(
    post_id: str,
    username: str = Depends(get_current_username),
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """
    Delete a post permanently.

    Only the post author can delete their post.
    """
    await service.delete(username, post_id)
    return MessageResponse(message="Post deleted successfully")
