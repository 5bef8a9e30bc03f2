"""Domain value objects for Vent."""

from vent.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    VoteId,
)
from vent.domain.value.types import (
    AnonymousId,
    Category,
    VotableType,
    VoteOutcome,
    Voter,
    VoteTarget,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "AnonymousId",
    "Category",
    "VotableType",
    "VoteOutcome",
    "Voter",
    "VoteTarget",
    "VoteValue",
]
