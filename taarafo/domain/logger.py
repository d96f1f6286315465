"""Logger interface used by domain services."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Structured logging sink.

    Calls are fire-and-forget; implementations must not raise.
    """

    @abstractmethod
    def log_trace(self, message: str) -> None:
        pass

    @abstractmethod
    def log_debug(self, message: str) -> None:
        pass

    @abstractmethod
    def log_information(self, message: str) -> None:
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        pass

    @abstractmethod
    def log_error(self, exception: BaseException) -> None:
        """Record a failure that needs attention but not paging."""
        pass

    @abstractmethod
    def log_critical(self, exception: BaseException) -> None:
        """Record an infrastructure failure that should alert someone."""
        pass
