"""PostgreSQL repository implementations."""

from scribe.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
