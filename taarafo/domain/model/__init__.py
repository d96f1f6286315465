"""Domain model entities for Taarafo."""

from taarafo.domain.model.post import Post

__all__ = [
    "Post",
]
