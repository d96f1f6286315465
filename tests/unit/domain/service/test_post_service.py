"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from taarafo.domain.clock import Clock
from taarafo.domain.error import (
    PostDependencyValidationError,
    PostErrorKind,
    PostValidationError,
)
from taarafo.domain.logger import Logger
from taarafo.domain.repository import PostRepository
from taarafo.domain.service import PostService
from taarafo.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestAddPost:
    """Tests for add_post method."""

    @pytest.mark.asyncio
    async def test_add_post_stores_post(self, unit_env):
        """Adding a valid post should store and return it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        post = make_post(created_date=clock.get_current_time())

        # Act
        result = await post_service.add_post(post)

        # Assert
        assert result == post
        assert await post_repo.select_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_add_post_twice_raises_already_exists(self, unit_env):
        """Adding a post with an existing ID should be rejected by storage."""
        # Arrange
        post_service = await unit_env.get(PostService)
        logger = await unit_env.get(Logger)
        clock = await unit_env.get(Clock)
        post = make_post(created_date=clock.get_current_time())
        await post_service.add_post(post)

        # Act & Assert
        with pytest.raises(PostDependencyValidationError) as exc_info:
            await post_service.add_post(post)

        assert exc_info.value.kind is PostErrorKind.ALREADY_EXISTS
        logger.log_error.assert_called_once_with(exc_info.value)


class TestRetrievePosts:
    """Tests for retrieve_all_posts and retrieve_post_by_id methods."""

    @pytest.mark.asyncio
    async def test_retrieve_all_posts_returns_newest_first(self, unit_env):
        """All stored posts come back, most recently created first."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        now = clock.get_current_time()

        older = make_post(created_date=now - timedelta(days=2))
        newer = make_post(created_date=now - timedelta(hours=1))
        await post_repo.insert(older)
        await post_repo.insert(newer)

        # Act
        posts = await post_service.retrieve_all_posts()

        # Assert
        assert posts == [newer, older]

    @pytest.mark.asyncio
    async def test_retrieve_all_posts_empty(self, unit_env):
        """No posts stored means an empty list, not an error."""
        post_service = await unit_env.get(PostService)

        assert await post_service.retrieve_all_posts() == []

    @pytest.mark.asyncio
    async def test_retrieve_post_by_id_returns_post(self, unit_env):
        """Retrieving an existing post by ID returns it."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.insert(post)

        result = await post_service.retrieve_post_by_id(post.id)

        assert result == post

    @pytest.mark.asyncio
    async def test_retrieve_post_by_id_raises_when_not_found(self, unit_env):
        """Retrieving an unknown post should raise a not-found validation error."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(PostValidationError) as exc_info:
            await post_service.retrieve_post_by_id(PostId(uuid4()))

        assert exc_info.value.kind is PostErrorKind.NOT_FOUND


class TestModifyPost:
    """Tests for modify_post method."""

    @pytest.mark.asyncio
    async def test_modify_post_updates_content(self, unit_env):
        """Modifying a post should overwrite the stored content and date."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        now = clock.get_current_time()
        created = now - timedelta(days=1)

        stored = make_post(created_date=created, content="Original content")
        await post_repo.insert(stored)

        modified = stored.model_copy(
            update={"content": "Updated content", "updated_date": now}
        )

        # Act
        result = await post_service.modify_post(modified)

        # Assert
        assert result.content == "Updated content"
        assert result.updated_date == now
        saved = await post_repo.select_by_id(stored.id)
        assert saved.content == "Updated content"
        assert saved.created_date == created

    @pytest.mark.asyncio
    async def test_modify_post_raises_when_not_found(self, unit_env):
        """Modifying a post that was never stored should raise not-found."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        now = clock.get_current_time()
        post = make_post(created_date=now - timedelta(minutes=5), updated_date=now)

        with pytest.raises(PostValidationError) as exc_info:
            await post_service.modify_post(post)

        assert exc_info.value.kind is PostErrorKind.NOT_FOUND
        assert await post_repo.select_all() == []


class TestRemovePost:
    """Tests for remove_post_by_id method."""

    @pytest.mark.asyncio
    async def test_remove_post_deletes_and_returns_post(self, unit_env):
        """Removing a post returns it and it is gone afterwards."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.insert(post)

        # Act
        removed = await post_service.remove_post_by_id(post.id)

        # Assert
        assert removed == post
        assert await post_repo.select_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_remove_post_twice_raises_not_found(self, unit_env):
        """The second removal of the same post finds nothing to remove."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.insert(post)
        await post_service.remove_post_by_id(post.id)

        with pytest.raises(PostValidationError) as exc_info:
            await post_service.remove_post_by_id(post.id)

        assert exc_info.value.kind is PostErrorKind.NOT_FOUND
