"""Score projections maintained by the score engine."""

from datetime import datetime

from pydantic import Field, model_validator

from vent.domain.model.common import DomainModel
from vent.domain.value import VoteTarget


class VoteCounters(DomainModel):
    """Vote counters of a scored entity."""

    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)
    score: int

    @model_validator(mode="after")
    def validate_score(self) -> "VoteCounters":
        if self.score != self.upvotes - self.downvotes:
            raise ValueError("score must equal upvotes - downvotes")
        return self


class RankingInputs(DomainModel):
    """Validated inputs of the hot score formula."""

    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)
    created_at: datetime


class ScoreSnapshot(DomainModel):
    """Current ranking inputs of a post or comment.

    hot_score is only maintained for posts and is None for comments.
    """

    target: VoteTarget
    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)
    score: int
    hot_score: float | None = None
    created_at: datetime
