"""Vote routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from vent.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
)
from vent.domain.service import JWTService
from vent.domain.value import VotableType
from vent.interface.error import CLIENT_ERRORS, to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote.

    Fields are untyped here so malformed values reach the use case and get
    the same messages as every other client.
    """

    value: Any = None
    anonymous_id: Any = None


async def _cast(
    target_type: VotableType,
    target_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CastVoteResponse:
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                target_type=target_type,
                target_id=target_id,
                value=request.value,
                anonymous_id=request.anonymous_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Cast, flip or retract a vote on a post.

    Voting is a toggle: repeating the same value removes the vote, the
    opposite value flips it. Signed-in users vote through their auth cookie;
    anyone else sends an ``anonymous_id``.

    Example:
        POST /posts/1b4e28ba-2fa1-11d2-883f-0016d3cca427/vote
        {"value": 1, "anonymous_id": "5f0c..."}

        Response:
        {
            "outcome": "created",
            "value": 1,
            "vote_id": "9a7c...",
            "upvotes": 1,
            "downvotes": 0,
            "score": 1,
            "hot_score": 1961.84
        }

    Raises:
        HTTPException: 400 on a malformed value or voter, 404 if the post is missing
    """
    return await _cast(
        VotableType.POST, post_id, request, cast_vote_use_case, jwt_service, auth_token
    )


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_on_comment(
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Cast, flip or retract a vote on a comment.

    Same toggle rules as posts; ``hot_score`` is always null for comments.
    """
    return await _cast(
        VotableType.COMMENT,
        comment_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.get("/votes/{vote_id}", response_model=GetVoteResponse)
async def get_vote(
    vote_id: str,
    get_vote_use_case: FromDishka[GetVoteUseCase],
) -> GetVoteResponse:
    """Get a vote record by ID.

    Raises:
        HTTPException: If vote not found
    """
    try:
        return await get_vote_use_case.execute(GetVoteRequest(vote_id=vote_id))
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)
