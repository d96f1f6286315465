"""Domain layer DI providers."""

from dishka import Scope, provide

from taarafo.domain.clock import Clock
from taarafo.domain.logger import Logger
from taarafo.domain.repository import PostRepository
from taarafo.domain.service import PostService
from taarafo.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, clock: Clock, logger: Logger
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, clock=clock, logger=logger)
