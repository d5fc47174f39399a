"""
Blog API - Blog Service (Business Logic)
==========================================

What:  Implements the six blog operations on top of a BlogRepository.
How:   Each method checks its inputs, issues exactly one repository call,
       and shapes the result into a response model.
Who:   Called by the route handlers in routes/blogs.py.

Error Handling Strategy:
    Client input problems raise ValidationError (400) before any storage
    access. A missing record on lookup raises NotFoundError (404). Storage
    failures arrive as DatabaseError from the repository and are left to
    propagate to the global handler, for every operation alike.
"""

import logging
from typing import Dict, Optional

from blog_api.exceptions import NotFoundError, ValidationError
from blog_api.repositories.blog_repository import BlogRepository
from blog_api.schemas.blog import (
    BlogCreatedResponse,
    BlogDeletedResponse,
    BlogDetailResponse,
    BlogListResponse,
    BlogPostResponse,
    BlogUpdatedResponse,
    ThumbsUpResponse,
    WriteResult,
)

logger = logging.getLogger(__name__)

# Vote actions and the counter delta each one applies
VOTE_DELTAS: Dict[str, int] = {"UP": 1, "DOWN": -1}


class BlogService:
    """
    Stateless business logic for blog posts.

    The repository is passed to every call so that one service instance can
    serve all requests, each with its own storage handle.
    """

    async def create_blog(
        self,
        repo: BlogRepository,
        title: Optional[str],
        content: Optional[str],
    ) -> BlogCreatedResponse:
        """
        Insert a new post.

        Raises:
            ValidationError: title or content missing/empty (nothing written)
            DatabaseError: the INSERT failed
        """
        if not title or not content:
            raise ValidationError(
                message="Title or content not found",
                context={"required": ["title", "content"]},
            )

        blog_id = await repo.create(title=title, content=content)
        return BlogCreatedResponse(blog_id=blog_id)

    async def list_blogs(self, repo: BlogRepository) -> BlogListResponse:
        posts = await repo.list_all()
        return BlogListResponse(
            data=[BlogPostResponse.model_validate(post) for post in posts],
        )

    async def get_blog(self, repo: BlogRepository, blog_id: Optional[int]) -> BlogDetailResponse:
        """
        Fetch one post by id.

        Raises:
            ValidationError: no id given
            NotFoundError: no row with that id
            DatabaseError: the SELECT failed
        """
        if blog_id is None:
            raise ValidationError(message="Blog id not found", field="id")

        post = await repo.get(blog_id)
        if post is None:
            raise NotFoundError(resource="blog", resource_id=str(blog_id))

        return BlogDetailResponse(data=[BlogPostResponse.model_validate(post)])

    async def update_blog(
        self,
        repo: BlogRepository,
        blog_id: Optional[int],
        title: Optional[str],
        content: Optional[str],
    ) -> BlogUpdatedResponse:
        """
        Overwrite title and content of a post.

        A non-existent id is not an error: the response reports
        affected_rows == 0.
        """
        if not title or not content or blog_id is None:
            raise ValidationError(
                message="Title, content or blog id not found",
                context={"required": ["id", "title", "content"]},
            )

        affected = await repo.update(blog_id, title=title, content=content)
        return BlogUpdatedResponse(info=WriteResult(affected_rows=affected))

    async def delete_blog(self, repo: BlogRepository, blog_id: Optional[int]) -> BlogDeletedResponse:
        """Delete a post. No existence check; a missing id yields 0 affected rows."""
        if blog_id is None:
            raise ValidationError(message="Blog id not found", field="id")

        affected = await repo.delete(blog_id)
        if affected:
            logger.info("Blog post deleted: %s", blog_id)
        return BlogDeletedResponse(result=WriteResult(affected_rows=affected))

    async def vote(
        self,
        repo: BlogRepository,
        blog_id: Optional[int],
        action: Optional[str],
    ) -> ThumbsUpResponse:
        """
        Apply a thumbs-up ("UP") or thumbs-down ("DOWN") vote.

        The action is matched exactly; anything else is rejected before the
        database is touched. The counter is not clamped and may go negative.

        Raises:
            ValidationError: action not "UP"/"DOWN", or no id given
            DatabaseError: the UPDATE failed
        """
        delta = VOTE_DELTAS.get(action) if isinstance(action, str) else None
        if delta is None:
            raise ValidationError(
                message="Invalid action",
                field="action",
                context={"allowed": sorted(VOTE_DELTAS)},
            )
        if blog_id is None:
            raise ValidationError(message="Blog id not found", field="id")

        affected = await repo.adjust_thumbs_up(blog_id, delta)
        return ThumbsUpResponse(result=WriteResult(affected_rows=affected))


# ── Singleton Instance ────────────────────────────────────────────────────
blog_service = BlogService()
