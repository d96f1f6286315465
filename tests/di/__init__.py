"""Mock providers for testing."""

from .observability import FixedClock, MockObservabilityProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FixedClock",
    "MockObservabilityProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
