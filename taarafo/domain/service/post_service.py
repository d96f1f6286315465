"""Post domain service."""

from typing import Awaitable, Callable, List, Optional, TypeVar

import logfire

from taarafo.domain.clock import Clock
from taarafo.domain.error import PostOperationError
from taarafo.domain.logger import Logger
from taarafo.domain.model.post import Post
from taarafo.domain.repository import PostRepository
from taarafo.domain.value import PostId

from .base import Service
from .post_error_classifier import Severity, classify_storage_error
from .post_validation import (
    validate_against_storage_post_on_modify,
    validate_post_id,
    validate_post_is_not_null,
    validate_post_on_add,
    validate_post_on_modify,
    validate_storage_post,
)

T = TypeVar("T")


class PostService(Service):
    """Foundation service for post operations.

    Every operation either returns a result or raises one of the
    `PostOperationError` subclasses. Failures are logged exactly once, here,
    and nothing else is sent to storage after a failure. No retries happen at
    this layer; the caller owns retry policy.
    """

    def __init__(
        self, post_repository: PostRepository, clock: Clock, logger: Logger
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post storage broker
            clock: Source of the current time
            logger: Sink for failures
        """
        self.post_repository = post_repository
        self.clock = clock
        self.logger = logger

    async def add_post(self, post: Optional[Post]) -> Post:
        """Add a new post.

        Args:
            post: Post to add; its dates must both be "now"

        Returns:
            The stored post

        Raises:
            PostValidationError: If the post is missing or invalid
            PostDependencyValidationError: If a post with the same ID exists
            PostDependencyError: If storage failed
            PostServiceError: On any other failure
        """

        async def add() -> Post:
            validate_post_is_not_null(post)
            validate_post_on_add(post, self.clock.get_current_time())
            return await self.post_repository.insert(post)

        with logfire.span("post_service.add_post", post_id=_id_of(post)):
            return await self._try_catch(add)

    async def retrieve_all_posts(self) -> List[Post]:
        """Retrieve every post.

        Raises:
            PostDependencyError: If storage failed
            PostServiceError: On any other failure
        """
        with logfire.span("post_service.retrieve_all_posts"):
            return await self._try_catch(self.post_repository.select_all)

    async def retrieve_post_by_id(self, post_id: PostId) -> Post:
        """Retrieve a post by ID.

        Raises:
            PostValidationError: If the ID is empty or no such post exists
            PostDependencyError: If storage failed
            PostServiceError: On any other failure
        """

        async def retrieve() -> Post:
            validate_post_id(post_id)
            maybe_post = await self.post_repository.select_by_id(post_id)
            return validate_storage_post(maybe_post, post_id)

        with logfire.span("post_service.retrieve_post_by_id", post_id=str(post_id)):
            return await self._try_catch(retrieve)

    async def modify_post(self, post: Optional[Post]) -> Post:
        """Modify an existing post.

        The clock is read once, before the stored post is looked up, and the
        lookup always precedes the write. If the lookup fails the write is
        never attempted.

        Args:
            post: Post carrying the new state and a fresh `updated_date`

        Returns:
            The updated post

        Raises:
            PostValidationError: If the post is missing, invalid or unknown
            PostDependencyError: If storage failed or the post is locked
            PostServiceError: On any other failure
        """

        async def modify() -> Post:
            validate_post_is_not_null(post)
            validate_post_on_modify(post, self.clock.get_current_time())
            maybe_post = await self.post_repository.select_by_id(post.id)
            storage_post = validate_storage_post(maybe_post, post.id)
            validate_against_storage_post_on_modify(post, storage_post)
            return await self.post_repository.update(post)

        with logfire.span("post_service.modify_post", post_id=_id_of(post)):
            return await self._try_catch(modify)

    async def remove_post_by_id(self, post_id: PostId) -> Post:
        """Remove a post by ID.

        Returns:
            The removed post

        Raises:
            PostValidationError: If the ID is empty or no such post exists
            PostDependencyError: If storage failed or the post was removed
                concurrently
            PostServiceError: On any other failure
        """

        async def remove() -> Post:
            validate_post_id(post_id)
            maybe_post = await self.post_repository.select_by_id(post_id)
            storage_post = validate_storage_post(maybe_post, post_id)
            return await self.post_repository.delete(storage_post)

        with logfire.span("post_service.remove_post_by_id", post_id=str(post_id)):
            return await self._try_catch(remove)

    async def _try_catch(self, operation: Callable[[], Awaitable[T]]) -> T:
        try:
            return await operation()
        except PostOperationError as error:
            # Raised by validation, already in domain terms
            self.logger.log_error(error)
            raise
        except Exception as exc:
            error, severity = classify_storage_error(exc)
            self._log(error, severity)
            raise error

    def _log(self, error: PostOperationError, severity: Severity) -> None:
        if severity is Severity.CRITICAL:
            self.logger.log_critical(error)
        else:
            self.logger.log_error(error)


def _id_of(post: Optional[Post]) -> Optional[str]:
    return str(post.id) if post is not None else None
