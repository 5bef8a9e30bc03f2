"""Cast vote use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from vent.domain.model import VoteResult
from vent.domain.service import VoteService
from vent.domain.value import VotableType, VoteOutcome, VoteTarget, VoteValue

from vent.application.usecase.base import BaseUseCase
from vent.application.usecase.identity import parse_target_id, resolve_voter


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``value`` and ``anonymous_id`` are untrusted and validated by the use
    case so clients get field-level messages.
    """

    target_type: VotableType
    target_id: str  # UUID string from the path
    value: Any = None
    anonymous_id: Any = None
    user_id: str | None = None  # From the auth cookie, if signed in


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``value`` and ``vote_id`` are null when the vote was removed.
    """

    outcome: VoteOutcome
    value: int | None
    vote_id: str | None
    upvotes: int
    downvotes: int
    score: int
    hot_score: float | None

    @classmethod
    def from_result(cls, result: VoteResult) -> "CastVoteResponse":
        return cls(
            outcome=result.outcome,
            value=int(result.value) if result.value is not None else None,
            vote_id=str(result.vote_id) if result.vote_id else None,
            upvotes=result.scores.upvotes,
            downvotes=result.scores.downvotes,
            score=result.scores.score,
            hot_score=result.scores.hot_score,
        )


class CastVoteUseCase(BaseUseCase):
    """Use case for casting, flipping or retracting a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The request is fully validated before anything is read or written.

        Raises:
            ValidationError: If the value or voter is malformed
            NotFoundError: If the post or comment does not exist
        """
        value = VoteValue.parse(request.value)
        voter = resolve_voter(request.user_id, request.anonymous_id)
        target = VoteTarget(
            type=request.target_type,
            id=parse_target_id(request.target_id, request.target_type.resource),
        )

        result = await self.vote_service.cast_vote(target, voter, value)
        logfire.info(
            "Vote request handled",
            target=str(target),
            outcome=result.outcome.value,
        )
        return CastVoteResponse.from_result(result)
