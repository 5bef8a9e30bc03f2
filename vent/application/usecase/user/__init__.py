"""User use cases."""

from .get_karma import GetKarmaRequest, GetKarmaResponse, GetKarmaUseCase
from .list_user_posts import (
    ListUserPostsRequest,
    ListUserPostsResponse,
    ListUserPostsUseCase,
)

__all__ = [
    "GetKarmaRequest",
    "GetKarmaResponse",
    "GetKarmaUseCase",
    "ListUserPostsRequest",
    "ListUserPostsResponse",
    "ListUserPostsUseCase",
]
