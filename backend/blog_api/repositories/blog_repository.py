"""
Blog API - Blog Storage Access
================================

What:  The storage interface the blog handlers talk to, and its SQLAlchemy
       implementation.
How:   BlogRepository is an abstract port. SqlAlchemyBlogRepository runs
       exactly one parameterized statement per call on a request-scoped
       AsyncSession. get_blog_repository() hands one to each request through
       FastAPI's Depends(), so tests can override it with an in-memory fake.

Statements:
    create            INSERT INTO blog (title, content) VALUES (:title, :content)
    list_all          SELECT * FROM blog ORDER BY id
    get               SELECT * FROM blog WHERE id = :id
    update            UPDATE blog SET title = :title, content = :content WHERE id = :id
    delete            DELETE FROM blog WHERE id = :id
    adjust_thumbs_up  UPDATE blog SET thumbsup = thumbsup + :delta WHERE id = :id

The vote is a single read-modify-write inside the database, so concurrent
votes on one row never lose an update.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db_session
from blog_api.exceptions import DatabaseError
from blog_api.models.blog import BlogPost

logger = logging.getLogger(__name__)


class BlogRepository(ABC):
    """Port for blog post persistence."""

    @abstractmethod
    async def create(self, title: str, content: str) -> int:
        """Insert a post and return its new id."""

    @abstractmethod
    async def list_all(self) -> List[BlogPost]:
        """Return every stored post ordered by id."""

    @abstractmethod
    async def get(self, blog_id: int) -> Optional[BlogPost]:
        """Return the post with this id, or None."""

    @abstractmethod
    async def update(self, blog_id: int, title: str, content: str) -> int:
        """Overwrite title and content; return the number of rows matched."""

    @abstractmethod
    async def delete(self, blog_id: int) -> int:
        """Remove the post; return the number of rows matched."""

    @abstractmethod
    async def adjust_thumbs_up(self, blog_id: int, delta: int) -> int:
        """Add delta to thumbsup atomically; return the number of rows matched."""


class SqlAlchemyBlogRepository(BlogRepository):
    """
    BlogRepository backed by an AsyncSession.

    The session's transaction is committed or rolled back by
    get_db_session(); this class never commits on its own.

    Error Handling:
        Any SQLAlchemyError is logged with its type and re-raised as
        DatabaseError, whose client-facing message is generic.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, title: str, content: str) -> int:
        post = BlogPost(title=title, content=content)
        try:
            self.session.add(post)
            await self.session.flush()  # Assigns the autoincrement id
        except SQLAlchemyError as exc:
            raise self._storage_error("create", exc) from exc
        logger.info("Blog post created: %s", post.id)
        return post.id

    async def list_all(self) -> List[BlogPost]:
        try:
            result = await self.session.execute(select(BlogPost).order_by(BlogPost.id))
        except SQLAlchemyError as exc:
            raise self._storage_error("list", exc) from exc
        return list(result.scalars().all())

    async def get(self, blog_id: int) -> Optional[BlogPost]:
        try:
            result = await self.session.execute(
                select(BlogPost).where(BlogPost.id == blog_id)
            )
        except SQLAlchemyError as exc:
            raise self._storage_error("get", exc, blog_id) from exc
        return result.scalar_one_or_none()

    async def update(self, blog_id: int, title: str, content: str) -> int:
        statement = (
            update(BlogPost)
            .where(BlogPost.id == blog_id)
            .values(title=title, content=content)
        )
        return await self._execute_write("update", statement, blog_id)

    async def delete(self, blog_id: int) -> int:
        statement = delete(BlogPost).where(BlogPost.id == blog_id)
        return await self._execute_write("delete", statement, blog_id)

    async def adjust_thumbs_up(self, blog_id: int, delta: int) -> int:
        statement = (
            update(BlogPost)
            .where(BlogPost.id == blog_id)
            .values(thumbsup=BlogPost.thumbsup + delta)
        )
        return await self._execute_write("adjust_thumbs_up", statement, blog_id)

    async def _execute_write(self, operation: str, statement, blog_id: int) -> int:
        """Run an UPDATE/DELETE and return its rowcount."""
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as exc:
            raise self._storage_error(operation, exc, blog_id) from exc
        affected = result.rowcount
        logger.debug("%s on blog %s matched %d row(s)", operation, blog_id, affected)
        return affected

    @staticmethod
    def _storage_error(
        operation: str, exc: SQLAlchemyError, blog_id: Optional[int] = None
    ) -> DatabaseError:
        logger.error("Database error during %s (blog_id=%s): %s", operation, blog_id, exc)
        context = {"operation": operation, "error_type": type(exc).__name__}
        if blog_id is not None:
            context["blog_id"] = blog_id
        return DatabaseError(context=context)


# ── Dependency ────────────────────────────────────────────────────────────
async def get_blog_repository(
    db: AsyncSession = Depends(get_db_session),
) -> BlogRepository:
    """
    FastAPI dependency providing the storage handle for one request.

    Tests replace it via app.dependency_overrides[get_blog_repository].
    """
    return SqlAlchemyBlogRepository(db)
