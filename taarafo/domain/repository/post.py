"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from taarafo.domain.model.post import Post
from taarafo.domain.value import PostId


class PostRepository(ABC):
    """Storage broker for the Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer and raise their
    storage technology's own errors; translating those is the post
    service's job.
    """

    @abstractmethod
    async def insert(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The inserted post
        """
        pass

    @abstractmethod
    async def select_all(self) -> List[Post]:
        """Select every stored post.

        Returns:
            All posts, most recently created first
        """
        pass

    @abstractmethod
    async def select_by_id(self, post_id: PostId) -> Optional[Post]:
        """Select a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Overwrite a stored post.

        Args:
            post: The post carrying the new state

        Returns:
            The updated post

        Raises:
            StaleDataError: If the post is no longer stored
        """
        pass

    @abstractmethod
    async def delete(self, post: Post) -> Post:
        """Delete a stored post (hard delete).

        Args:
            post: The post to delete

        Returns:
            The deleted post

        Raises:
            StaleDataError: If the post is no longer stored
        """
        pass
