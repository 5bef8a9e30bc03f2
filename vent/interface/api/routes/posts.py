"""Post routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Query, status
from pydantic import BaseModel

from vent.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from vent.application.usecase.post import (
    CalculateHotScoreResponse,
    CalculateHotScoreUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    GetRankingRequest,
    GetRankingResponse,
    GetRankingUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
)
from vent.domain.repository import PostSortOrder
from vent.domain.service import JWTService
from vent.domain.value import Category, VotableType
from vent.interface.error import CLIENT_ERRORS, to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    frustration: str
    identity: str
    category: str
    anonymous_id: Any = None


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Create a new post.

    Signed-in users are recorded as the author; otherwise the optional
    ``anonymous_id`` is.
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                frustration=request.frustration,
                identity=request.identity,
                category=request.category,
                anonymous_id=request.anonymous_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: PostSortOrder = Query(default=PostSortOrder.HOT),
    category: Category | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    anonymous_id: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts for the feed.

    Sorts: ``hot`` (hot score, newest first on ties), ``top`` (score) and
    ``new`` (creation time). ``limit`` is capped at the configured maximum.
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                sort=sort,
                category=category,
                limit=limit,
                offset=offset,
                user_id=jwt_service.get_user_id_from_token(auth_token),
                anonymous_id=anonymous_id,
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.post("/hot-score", response_model=CalculateHotScoreResponse)
async def calculate_hot_score(
    hot_score_use_case: FromDishka[CalculateHotScoreUseCase],
    payload: dict[str, Any] = Body(...),
) -> CalculateHotScoreResponse:
    """Compute the hot score for ``{upvotes, downvotes, createdAt}``.

    Example:
        POST /posts/hot-score
        {"upvotes": 10, "downvotes": 0, "createdAt": "2024-01-01T00:00:00Z"}

        Response:
        {"hot_score": 1.0}
    """
    try:
        return await hot_score_use_case.execute(payload)
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    anonymous_id: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Get a post by ID, with the viewer's vote if known."""
    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=post_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
                anonymous_id=anonymous_id,
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.get("/{post_id}/ranking", response_model=GetRankingResponse)
async def get_post_ranking(
    post_id: str,
    get_ranking_use_case: FromDishka[GetRankingUseCase],
) -> GetRankingResponse:
    """Get a post's counters, score and hot score."""
    try:
        return await get_ranking_use_case.execute(
            GetRankingRequest(target_type=VotableType.POST, target_id=post_id)
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_post_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    anonymous_id: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get all comments on a post, highest score first, then oldest."""
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                post_id=post_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
                anonymous_id=anonymous_id,
            )
        )
    except CLIENT_ERRORS as e:
        raise to_http_exception(e)
