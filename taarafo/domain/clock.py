"""Clock interface."""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Source of the current time.

    Injected wherever the domain needs "now" so tests can pin it.
    """

    @abstractmethod
    def get_current_time(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        pass
