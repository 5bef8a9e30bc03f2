"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from vent.application.usecase.user import (
    GetKarmaRequest,
    GetKarmaResponse,
    GetKarmaUseCase,
    ListUserPostsRequest,
    ListUserPostsResponse,
    ListUserPostsUseCase,
)
from vent.domain.service import JWTService
from vent.interface.error import CLIENT_ERRORS, to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/karma", response_model=GetKarmaResponse)
async def get_karma(
    user_id: str,
    get_karma_use_case: FromDishka[GetKarmaUseCase],
) -> GetKarmaResponse:
    """Get a registered user's karma.

    Karma is the sum of the scores of the user's posts and comments.
    Users without content have zero karma.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000/karma

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "post_karma": 12,
            "comment_karma": 3,
            "total_karma": 15
        }
    """
    try:
        return await get_karma_use_case.execute(GetKarmaRequest(user_id=user_id))
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.get("/{user_id}/posts", response_model=ListUserPostsResponse)
async def list_user_posts(
    user_id: str,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    anonymous_id: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListUserPostsResponse:
    """List a registered user's posts, newest first.

    ``my_vote`` on each post reflects the requesting viewer, like the feed.
    """
    try:
        return await list_user_posts_use_case.execute(
            ListUserPostsRequest(
                author_id=user_id,
                limit=limit,
                offset=offset,
                user_id=jwt_service.get_user_id_from_token(auth_token),
                anonymous_id=anonymous_id,
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)
