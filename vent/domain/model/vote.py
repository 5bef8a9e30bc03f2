"""Vote entity.

A vote records one voter's +1 or -1 on one post or comment. There is at
most one vote per (target, voter) pair; repeating the same vote removes it.
"""

from datetime import datetime

from pydantic import Field, model_validator

from vent.domain.model.common import DomainModel, utc_now
from vent.domain.model.score import ScoreSnapshot
from vent.domain.value import VoteId, VoteOutcome, Voter, VoteTarget, VoteValue


class Vote(DomainModel):
    """Vote entity.

    The voter is a Voter value object, so a vote can never carry both a
    user id and an anonymous id, nor neither.
    """

    id: VoteId
    target: VoteTarget
    voter: Voter
    value: VoteValue
    created_at: datetime = Field(default_factory=utc_now)


class VoteResult(DomainModel):
    """Result of casting a vote.

    ``value`` and ``vote_id`` are None exactly when the vote was deleted.
    """

    outcome: VoteOutcome
    value: VoteValue | None
    vote_id: VoteId | None
    scores: ScoreSnapshot

    @model_validator(mode="after")
    def validate_shape(self) -> "VoteResult":
        """Deleted votes carry no value or id; others always do."""
        deleted = self.outcome == VoteOutcome.DELETED
        if deleted != (self.vote_id is None) or deleted != (self.value is None):
            raise ValueError("value and vote_id must be None exactly when deleted")
        return self
