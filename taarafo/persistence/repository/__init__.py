"""PostgreSQL repository implementations."""

from taarafo.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
