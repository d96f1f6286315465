"""Infrastructure providers."""

# Import bases
from .observability import ObservabilityProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .observability import ProdObservabilityProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ObservabilityProvider",
    "PersistenceProvider",
    "ProdObservabilityProvider",
    "ProdPersistenceProvider",
]
