"""Repository interfaces for Vent domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from vent.domain.repository.comment import CommentRepository
from vent.domain.repository.post import PostRepository, PostSortOrder
from vent.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "PostSortOrder",
    "CommentRepository",
    "VoteRepository",
]
