"""Comment entity.

Comments are threaded replies on posts, nested at most MAX_COMMENT_DEPTH
levels below the top-level comment.
"""

from datetime import datetime

from pydantic import Field, model_validator

from vent.domain.model.common import DomainModel, utc_now
from vent.domain.value import AnonymousId, CommentId, PostId, UserId

MAX_COMMENT_DEPTH = 2


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)
    """

    id: CommentId
    post_id: PostId
    content: str = Field(min_length=1, max_length=2000)
    parent_id: CommentId | None = None
    depth: int = Field(default=0, ge=0, le=MAX_COMMENT_DEPTH)
    author_id: UserId | None = None
    anonymous_id: AnonymousId | None = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    score: int = 0
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_invariants(self) -> "Comment":
        """Validate score projection and author exclusivity."""
        if self.score != self.upvotes - self.downvotes:
            raise ValueError("score must equal upvotes - downvotes")
        if self.author_id is not None and self.anonymous_id is not None:
            raise ValueError("Comment cannot have both author_id and anonymous_id")
        return self
