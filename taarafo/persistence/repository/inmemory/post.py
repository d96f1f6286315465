"""In-memory post repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from taarafo.domain.model.post import Post
from taarafo.domain.repository.post import PostRepository
from taarafo.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Raises the same SQLAlchemy errors the Postgres implementation would for
    duplicate IDs and vanished rows.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        if post.id in self._posts:
            raise IntegrityError(
                "INSERT INTO posts",
                {"id": str(post.id)},
                Exception(
                    'duplicate key value violates unique constraint "posts_pkey"'
                ),
            )
        self._posts[post.id] = post
        return post

    async def select_all(self) -> list[Post]:
        """Select every post, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.created_date, reverse=True)

    async def select_by_id(self, post_id: PostId) -> Optional[Post]:
        """Select a post by ID."""
        return self._posts.get(post_id)

    async def update(self, post: Post) -> Post:
        """Overwrite a stored post."""
        if post.id not in self._posts:
            raise StaleDataError(f"Post {post.id} was removed concurrently")
        self._posts[post.id] = post
        return post

    async def delete(self, post: Post) -> Post:
        """Delete a stored post."""
        removed = self._posts.pop(post.id, None)
        if removed is None:
            raise StaleDataError(f"Post {post.id} was removed concurrently")
        return removed
