"""
Blog API - Blog Service Unit Tests
====================================

What:  Tests for BlogService presence checks and response shaping.
How:   Uses an AsyncMock repository; no database, no HTTP.

What we test:
    ✅ Missing/empty fields raise ValidationError and never reach storage
    ✅ Missing record on lookup raises NotFoundError
    ✅ Vote actions map to +1 / -1, anything else is rejected
    ✅ DatabaseError from storage propagates unchanged
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from blog_api.exceptions import DatabaseError, NotFoundError, ValidationError
from blog_api.models.blog import BlogPost
from blog_api.services.blog_service import BlogService


@pytest.fixture
def mock_repo():
    return MagicMock(
        create=AsyncMock(return_value=1),
        list_all=AsyncMock(return_value=[]),
        get=AsyncMock(return_value=None),
        update=AsyncMock(return_value=1),
        delete=AsyncMock(return_value=1),
        adjust_thumbs_up=AsyncMock(return_value=1),
    )


class TestBlogServiceCreate:
    """Tests for create_blog."""

    def setup_method(self):
        self.service = BlogService()

    @pytest.mark.asyncio
    async def test_create_returns_new_id(self, mock_repo):
        mock_repo.create.return_value = 7

        result = await self.service.create_blog(mock_repo, title="A", content="B")

        assert result.success is True
        assert result.blog_id == 7
        assert result.model_dump(by_alias=True) == {"success": True, "blogId": 7}
        mock_repo.create.assert_awaited_once_with(title="A", content="B")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content",
        [(None, "B"), ("A", None), ("", "B"), ("A", ""), (None, None)],
    )
    async def test_create_missing_fields_rejected(self, mock_repo, title, content):
        """Missing or empty title/content is a 400 with no write."""
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_blog(mock_repo, title=title, content=content)

        assert exc_info.value.message == "Title or content not found"
        mock_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_storage_failure_propagates(self, mock_repo):
        mock_repo.create.side_effect = DatabaseError(context={"operation": "create"})

        with pytest.raises(DatabaseError):
            await self.service.create_blog(mock_repo, title="A", content="B")


class TestBlogServiceRead:
    """Tests for list_blogs and get_blog."""

    def setup_method(self):
        self.service = BlogService()

    @pytest.mark.asyncio
    async def test_list_wraps_rows(self, mock_repo):
        mock_repo.list_all.return_value = [
            BlogPost(id=1, title="A", content="B", thumbsup=0),
            BlogPost(id=2, title="C", content="D", thumbsup=-3),
        ]

        result = await self.service.list_blogs(mock_repo)

        assert result.success is True
        assert [post.id for post in result.data] == [1, 2]
        assert result.data[1].thumbsup == -3

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_repo):
        result = await self.service.list_blogs(mock_repo)
        assert result.data == []

    @pytest.mark.asyncio
    async def test_get_found_returns_single_element_list(self, mock_repo):
        mock_repo.get.return_value = BlogPost(id=1, title="A", content="B", thumbsup=0)

        result = await self.service.get_blog(mock_repo, blog_id=1)

        assert result.model_dump() == {
            "success": True,
            "data": [{"id": 1, "title": "A", "content": "B", "thumbsup": 0}],
        }

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_repo):
        with pytest.raises(NotFoundError):
            await self.service.get_blog(mock_repo, blog_id=404)

    @pytest.mark.asyncio
    async def test_get_without_id_rejected(self, mock_repo):
        with pytest.raises(ValidationError):
            await self.service.get_blog(mock_repo, blog_id=None)
        mock_repo.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_storage_failure_propagates(self, mock_repo):
        """Lookup failures go to the central handler like every other operation."""
        mock_repo.get.side_effect = DatabaseError()

        with pytest.raises(DatabaseError):
            await self.service.get_blog(mock_repo, blog_id=1)


class TestBlogServiceWrite:
    """Tests for update_blog and delete_blog."""

    def setup_method(self):
        self.service = BlogService()

    @pytest.mark.asyncio
    async def test_update_reports_affected_rows(self, mock_repo):
        result = await self.service.update_blog(mock_repo, blog_id=1, title="X", content="Y")

        assert result.success is True
        assert result.info.affected_rows == 1
        mock_repo.update.assert_awaited_once_with(1, title="X", content="Y")

    @pytest.mark.asyncio
    async def test_update_nonexistent_id_succeeds_with_zero(self, mock_repo):
        mock_repo.update.return_value = 0

        result = await self.service.update_blog(mock_repo, blog_id=99, title="X", content="Y")

        assert result.success is True
        assert result.info.affected_rows == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "blog_id,title,content",
        [(None, "X", "Y"), (1, None, "Y"), (1, "X", None), (1, "", "Y")],
    )
    async def test_update_missing_fields_rejected(self, mock_repo, blog_id, title, content):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_blog(mock_repo, blog_id=blog_id, title=title, content=content)

        assert exc_info.value.message == "Title, content or blog id not found"
        mock_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_nonexistent_id_succeeds_with_zero(self, mock_repo):
        mock_repo.delete.return_value = 0

        result = await self.service.delete_blog(mock_repo, blog_id=99)

        assert result.success is True
        assert result.result.affected_rows == 0

    @pytest.mark.asyncio
    async def test_delete_without_id_rejected(self, mock_repo):
        with pytest.raises(ValidationError):
            await self.service.delete_blog(mock_repo, blog_id=None)
        mock_repo.delete.assert_not_awaited()


class TestBlogServiceVote:
    """Tests for vote."""

    def setup_method(self):
        self.service = BlogService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action,delta", [("UP", 1), ("DOWN", -1)])
    async def test_vote_applies_delta(self, mock_repo, action, delta):
        result = await self.service.vote(mock_repo, blog_id=3, action=action)

        assert result.message == "thumbsup updated successfully"
        assert result.result.affected_rows == 1
        mock_repo.adjust_thumbs_up.assert_awaited_once_with(3, delta)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["up", "Down", "SIDEWAYS", "", None, 1])
    async def test_vote_invalid_action_rejected(self, mock_repo, action):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.vote(mock_repo, blog_id=3, action=action)

        assert exc_info.value.message == "Invalid action"
        mock_repo.adjust_thumbs_up.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_vote_storage_failure_propagates(self, mock_repo):
        mock_repo.adjust_thumbs_up.side_effect = DatabaseError()

        with pytest.raises(DatabaseError):
            await self.service.vote(mock_repo, blog_id=3, action="UP")
