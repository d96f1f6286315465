"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from taarafo.domain.model.post import Post
from taarafo.domain.value import PostId

# Pinned "now" shared by the mock clock and the post factories
FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_post(
    created_date: datetime = FIXED_NOW,
    updated_date: datetime | None = None,
    post_id: PostId | None = None,
    content: str = "Hello from Taarafo",
    author: str = "author.taarafo",
) -> Post:
    """Helper function to build posts for tests.

    Args:
        created_date: Creation date of the post
        updated_date: Last update date (defaults to created_date)
        post_id: Post ID (random if omitted)
        content: Post content
        author: Post author

    Returns:
        Post domain model
    """
    return Post(
        id=post_id or PostId(uuid4()),
        content=content,
        author=author,
        created_date=created_date,
        updated_date=updated_date or created_date,
    )


def make_modified_post(now: datetime = FIXED_NOW, minutes_in_past: int = 5) -> Post:
    """Build a post created in the past and updated at `now`.

    This is the shape a caller sends to `modify_post`.
    """
    return make_post(
        created_date=now - timedelta(minutes=minutes_in_past),
        updated_date=now,
    )


@pytest.fixture
def now() -> datetime:
    """The pinned current time."""
    return FIXED_NOW
