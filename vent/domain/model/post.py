"""Post aggregate root.

Posts are short anonymous "frustrations" filed under a category. Their
vote counters are a cached projection of the vote ledger and are only
ever written by the score engine.
"""

from datetime import datetime

from pydantic import Field, model_validator

from vent.domain.model.common import DomainModel, utc_now
from vent.domain.value import AnonymousId, Category, PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - score always equals upvotes - downvotes
    - counters are never negative
    - an author is a registered user, an anonymous token, or unknown, never both
    """

    id: PostId
    frustration: str = Field(min_length=1, max_length=500)
    identity: str = Field(min_length=1, max_length=100)
    category: Category
    author_id: UserId | None = None
    anonymous_id: AnonymousId | None = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    score: int = 0
    hot_score: float = 0.0
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_invariants(self) -> "Post":
        """Validate score projection and author exclusivity."""
        if self.score != self.upvotes - self.downvotes:
            raise ValueError("score must equal upvotes - downvotes")
        if self.author_id is not None and self.anonymous_id is not None:
            raise ValueError("Post cannot have both author_id and anonymous_id")
        return self
