"""PostgreSQL repository implementations."""

from vent.persistence.repository.comment import PostgresCommentRepository
from vent.persistence.repository.post import PostgresPostRepository
from vent.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
