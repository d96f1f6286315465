"""Repository interfaces for the Taarafo domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from taarafo.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
]
