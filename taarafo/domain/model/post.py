"""Post entity.

Posts are the unit of content shared on Taarafo. Field rules (blank content,
stale dates, ...) are checked by the post service rather than here, so that
every broken field is reported at once as a single validation error.
"""

from datetime import datetime

from taarafo.domain.model.common import DomainModel
from taarafo.domain.value import PostId


class Post(DomainModel):
    """A post as stored by the storage broker."""

    id: PostId
    content: str
    author: str
    created_date: datetime
    updated_date: datetime
