"""
Blog API - Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── fake_repo: In-memory BlogRepository
    ├── test_client: HTTPX AsyncClient wired to fake_repo
    ├── sqlite_session_factory: Sessions on a throwaway SQLite file with the blog table
    └── sql_client: HTTPX AsyncClient wired to the SQLite database
"""

import os
import tempfile

# Override settings for testing BEFORE any blog_api imports:
# blog_api.config builds its singleton and blog_api.database its engine at import.
_TEST_DIR = tempfile.mkdtemp(prefix="blog_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/app.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = ""

from typing import Dict, List, Optional  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog_api.database import Base  # noqa: E402
from blog_api.models.blog import BlogPost  # noqa: E402
from blog_api.repositories.blog_repository import BlogRepository  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Storage Fake
# ══════════════════════════════════════════════════════════════════════════

class InMemoryBlogRepository(BlogRepository):
    """
    Dict-backed BlogRepository.

    Ids are assigned from a counter like an autoincrement column. No method
    awaits between reading and writing a row, so each call is atomic on
    the event loop.
    """

    def __init__(self):
        self.rows: Dict[int, BlogPost] = {}
        self._next_id = 1

    async def create(self, title: str, content: str) -> int:
        blog_id = self._next_id
        self._next_id += 1
        self.rows[blog_id] = BlogPost(id=blog_id, title=title, content=content, thumbsup=0)
        return blog_id

    async def list_all(self) -> List[BlogPost]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def get(self, blog_id: int) -> Optional[BlogPost]:
        return self.rows.get(blog_id)

    async def update(self, blog_id: int, title: str, content: str) -> int:
        post = self.rows.get(blog_id)
        if post is None:
            return 0
        post.title = title
        post.content = content
        return 1

    async def delete(self, blog_id: int) -> int:
        return 1 if self.rows.pop(blog_id, None) is not None else 0

    async def adjust_thumbs_up(self, blog_id: int, delta: int) -> int:
        post = self.rows.get(blog_id)
        if post is None:
            return 0
        post.thumbsup += delta
        return 1


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = post
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def fake_repo():
    return InMemoryBlogRepository()


@pytest.fixture
def sample_post_data():
    return {"title": "A", "content": "B"}


@pytest_asyncio.fixture
async def test_client(fake_repo):
    """
    HTTPX AsyncClient talking to the app, with storage replaced by fake_repo.

    raise_app_exceptions=False lets tests observe the 500 response Starlette
    sends for unhandled errors instead of the re-raised exception.
    """
    from blog_api.main import app
    from blog_api.repositories.blog_repository import get_blog_repository

    app.dependency_overrides[get_blog_repository] = lambda: fake_repo
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sqlite_session_factory(tmp_path):
    """
    Session factory bound to a fresh SQLite file holding an empty blog table.

    A file (not :memory:) database lets separate sessions use separate
    connections, which the concurrent vote tests rely on.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def sql_client(sqlite_session_factory):
    """HTTPX AsyncClient running the real repository against SQLite."""
    from blog_api.database import get_db_session
    from blog_api.main import app

    async def _session():
        async with sqlite_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
