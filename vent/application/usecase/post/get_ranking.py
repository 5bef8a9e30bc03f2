"""Get ranking inputs use case."""

from datetime import datetime

from pydantic import BaseModel

from vent.application.usecase.identity import parse_target_id
from vent.domain.service import ScoreService
from vent.domain.value import VotableType, VoteTarget


class GetRankingRequest(BaseModel):
    """Get ranking request."""

    target_type: VotableType
    target_id: str


class GetRankingResponse(BaseModel):
    """Current ranking inputs of a post or comment.

    ``hot_score`` is null for comments.
    """

    upvotes: int
    downvotes: int
    score: int
    hot_score: float | None
    created_at: datetime


class GetRankingUseCase:
    """Use case for reading the counters and hot score of a post or comment."""

    def __init__(self, score_service: ScoreService) -> None:
        self.score_service = score_service

    async def execute(self, request: GetRankingRequest) -> GetRankingResponse:
        """Raises NotFoundError if the target does not exist."""
        target = VoteTarget(
            type=request.target_type,
            id=parse_target_id(request.target_id, request.target_type.resource),
        )
        snapshot = await self.score_service.get_ranking_inputs(target)
        return GetRankingResponse(
            upvotes=snapshot.upvotes,
            downvotes=snapshot.downvotes,
            score=snapshot.score,
            hot_score=snapshot.hot_score,
            created_at=snapshot.created_at,
        )
