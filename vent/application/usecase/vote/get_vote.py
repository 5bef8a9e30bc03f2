"""Get vote use case."""

from datetime import datetime

from pydantic import BaseModel

from vent.domain.service import VoteService
from vent.domain.value import VotableType, VoteId

from vent.application.usecase.identity import parse_target_id


class GetVoteRequest(BaseModel):
    """Get vote request."""

    vote_id: str


class GetVoteResponse(BaseModel):
    """A vote record. The voter's identity is not exposed."""

    vote_id: str
    target_type: VotableType
    target_id: str
    value: int
    created_at: datetime


class GetVoteUseCase:
    """Use case for reading a single vote record."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        """Raises NotFoundError if the vote does not exist."""
        vote_id = VoteId(parse_target_id(request.vote_id, "Vote"))
        vote = await self.vote_service.get_vote(vote_id)
        return GetVoteResponse(
            vote_id=str(vote.id),
            target_type=vote.target.type,
            target_id=str(vote.target.id),
            value=int(vote.value),
            created_at=vote.created_at,
        )
