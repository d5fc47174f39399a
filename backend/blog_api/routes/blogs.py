"""
Blog API - Blog Route Handlers
================================

What:  HTTP surface for blog posts, mounted at <api_prefix>/blogs.
How:   Each handler resolves a repository through Depends(), delegates to
       blog_service, and returns the response model with its status code.

Route Inventory:
    GET    /blogs                          list every post
    POST   /blogs/POST                     create a post
    PATCH  /blogs/UPDATE_THUMBSUP/{id}     vote UP/DOWN
    GET    /blogs/{id}                     fetch one post
    PATCH  /blogs/{id}                     overwrite title and content
    DELETE /blogs/{id}                     delete a post

Handlers contain no try/except: every failure is an exception handled by
the global handlers in main.py.
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from blog_api.models.blog import MAX_BLOG_ID
from blog_api.repositories.blog_repository import BlogRepository, get_blog_repository
from blog_api.schemas.blog import (
    BlogCreatedResponse,
    BlogCreateRequest,
    BlogDeletedResponse,
    BlogDetailResponse,
    BlogListResponse,
    BlogUpdatedResponse,
    BlogUpdateRequest,
    ErrorResponse,
    ThumbsUpRequest,
    ThumbsUpResponse,
)
from blog_api.services.blog_service import blog_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blogs", tags=["Blogs"])

_CLIENT_ERROR = {400: {"description": "Missing or invalid input", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


@router.get(
    "",
    response_model=BlogListResponse,
    responses={**_SERVER_ERROR},
    summary="List all blog posts",
)
async def list_blogs(
    repo: BlogRepository = Depends(get_blog_repository),
) -> BlogListResponse:
    return await blog_service.list_blogs(repo)


@router.post(
    "/POST",
    response_model=BlogCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_CLIENT_ERROR, **_SERVER_ERROR},
    summary="Create a blog post",
)
async def create_blog(
    body: BlogCreateRequest,
    repo: BlogRepository = Depends(get_blog_repository),
) -> BlogCreatedResponse:
    """Both title and content are required and must be non-empty."""
    return await blog_service.create_blog(repo, title=body.title, content=body.content)


@router.patch(
    "/UPDATE_THUMBSUP/{blog_id}",
    response_model=ThumbsUpResponse,
    responses={**_CLIENT_ERROR, **_SERVER_ERROR},
    summary="Vote a blog post up or down",
)
async def update_thumbs_up(
    body: ThumbsUpRequest,
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID, description="Blog post id"),
    repo: BlogRepository = Depends(get_blog_repository),
) -> ThumbsUpResponse:
    """
    Body: {"action": "UP"} adds one, {"action": "DOWN"} subtracts one.

    Voting on an id that does not exist succeeds with affected_rows 0.
    """
    return await blog_service.vote(repo, blog_id=blog_id, action=body.action)


@router.get(
    "/{blog_id}",
    response_model=BlogDetailResponse,
    responses={
        404: {"description": "Blog not found", "model": ErrorResponse},
        **_CLIENT_ERROR,
        **_SERVER_ERROR,
    },
    summary="Get a blog post by ID",
)
async def get_blog(
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID, description="Blog post id"),
    repo: BlogRepository = Depends(get_blog_repository),
) -> BlogDetailResponse:
    return await blog_service.get_blog(repo, blog_id=blog_id)


@router.patch(
    "/{blog_id}",
    response_model=BlogUpdatedResponse,
    responses={**_CLIENT_ERROR, **_SERVER_ERROR},
    summary="Replace a blog post's title and content",
)
async def update_blog(
    body: BlogUpdateRequest,
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID, description="Blog post id"),
    repo: BlogRepository = Depends(get_blog_repository),
) -> BlogUpdatedResponse:
    return await blog_service.update_blog(
        repo, blog_id=blog_id, title=body.title, content=body.content
    )


@router.delete(
    "/{blog_id}",
    response_model=BlogDeletedResponse,
    responses={**_CLIENT_ERROR, **_SERVER_ERROR},
    summary="Delete a blog post",
)
async def delete_blog(
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID, description="Blog post id"),
    repo: BlogRepository = Depends(get_blog_repository),
) -> BlogDeletedResponse:
    return await blog_service.delete_blog(repo, blog_id=blog_id)
