"""Post use cases."""

from .calculate_hot_score import CalculateHotScoreResponse, CalculateHotScoreUseCase
from .create_post import CreatePostRequest, CreatePostUseCase
from .get_post import GetPostRequest, GetPostUseCase, PostItem
from .get_ranking import GetRankingRequest, GetRankingResponse, GetRankingUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase

__all__ = [
    "CalculateHotScoreResponse",
    "CalculateHotScoreUseCase",
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "GetRankingRequest",
    "GetRankingResponse",
    "GetRankingUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
]
