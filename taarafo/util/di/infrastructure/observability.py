"""Observability infrastructure providers (clock and logger)."""

from dishka import Scope, provide

from taarafo.adapter.clock import SystemClock
from taarafo.adapter.logfire_logger import LogfireLogger
from taarafo.config import Settings
from taarafo.domain.clock import Clock
from taarafo.domain.logger import Logger
from taarafo.util.di.base import ProviderBase
from taarafo.util.logging import setup_logging
from taarafo.util.observability import configure_logfire


class ObservabilityProvider(ProviderBase):
    """Observability component base."""

    __mock_component__ = "observability"


class ProdObservabilityProvider(ObservabilityProvider):
    """Production clock and Logfire-backed logger."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide the system clock."""
        return SystemClock()

    @provide(scope=Scope.APP)
    def get_logger(self, settings: Settings) -> Logger:
        """Configure logging once and provide the Logfire logger."""
        setup_logging(settings)
        configure_logfire(settings)
        return LogfireLogger()
