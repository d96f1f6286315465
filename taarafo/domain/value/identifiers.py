"""Strongly typed identifiers for Taarafo domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)

# The all-zero UUID stands in for "no id supplied"
EMPTY_POST_ID = PostId(UUID(int=0))
