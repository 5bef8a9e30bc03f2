"""Get karma use case."""

from uuid import UUID

from pydantic import BaseModel

from vent.domain.error import NotFoundError
from vent.domain.service import KarmaService
from vent.domain.value import UserId


class GetKarmaRequest(BaseModel):
    """Get karma request."""

    user_id: str


class GetKarmaResponse(BaseModel):
    """A user's karma."""

    user_id: str
    post_karma: int
    comment_karma: int
    total_karma: int


class GetKarmaUseCase:
    """Use case for reading a registered user's karma."""

    def __init__(self, karma_service: KarmaService) -> None:
        self.karma_service = karma_service

    async def execute(self, request: GetKarmaRequest) -> GetKarmaResponse:
        try:
            user_id = UserId(UUID(request.user_id))
        except ValueError:
            raise NotFoundError("User", request.user_id)

        karma = await self.karma_service.get_karma(user_id)
        return GetKarmaResponse(
            user_id=str(karma.user_id),
            post_karma=karma.post_karma,
            comment_karma=karma.comment_karma,
            total_karma=karma.total_karma,
        )
