"""Calculate hot score use case."""

from typing import Any

from pydantic import BaseModel

from vent.application.usecase.base import BaseUseCase
from vent.domain.service import hot_score, parse_ranking_inputs


class CalculateHotScoreResponse(BaseModel):
    """Hot score for the given ranking inputs."""

    hot_score: float


class CalculateHotScoreUseCase(BaseUseCase):
    """Use case for computing a hot score from raw client-supplied inputs.

    Lets clients rank posts they hold locally exactly the way the feed does.
    """

    async def execute(self, payload: dict[str, Any]) -> CalculateHotScoreResponse:
        """Raises ValidationError with a field-level message on bad input."""
        inputs = parse_ranking_inputs(payload)
        return CalculateHotScoreResponse(
            hot_score=hot_score(inputs.upvotes, inputs.downvotes, inputs.created_at)
        )
