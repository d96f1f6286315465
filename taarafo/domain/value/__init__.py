"""Domain value objects for Taarafo."""

from taarafo.domain.value.identifiers import EMPTY_POST_ID, PostId

__all__ = [
    "EMPTY_POST_ID",
    "PostId",
]
