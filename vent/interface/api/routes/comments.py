"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from vent.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
)
from vent.application.usecase.post import (
    GetRankingRequest,
    GetRankingResponse,
    GetRankingUseCase,
)
from vent.domain.service import JWTService
from vent.domain.value import VotableType
from vent.interface.error import CLIENT_ERRORS, to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: str
    content: str
    parent_id: str | None = None  # Parent comment for replies
    anonymous_id: Any = None


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a post, or reply to a comment (at most two levels deep)."""
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=request.post_id,
                content=request.content,
                parent_id=request.parent_id,
                anonymous_id=request.anonymous_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.get("/{comment_id}/ranking", response_model=GetRankingResponse)
async def get_comment_ranking(
    comment_id: str,
    get_ranking_use_case: FromDishka[GetRankingUseCase],
) -> GetRankingResponse:
    """Get a comment's counters and score (no hot score)."""
    try:
        return await get_ranking_use_case.execute(
            GetRankingRequest(target_type=VotableType.COMMENT, target_id=comment_id)
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)
