"""List user posts use case."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from vent.application.usecase.identity import resolve_identity
from vent.application.usecase.post.get_post import PostItem
from vent.config import FeedSettings
from vent.domain.error import NotFoundError
from vent.domain.service import PostService, VoteService
from vent.domain.value import UserId, VotableType


class ListUserPostsRequest(BaseModel):
    """List user posts request."""

    author_id: str
    limit: int | None = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)
    anonymous_id: Any = None


class ListUserPostsResponse(BaseModel):
    """A user's posts, newest first."""

    user_id: str
    posts: list[PostItem]
    total: int
    limit: int
    offset: int


class ListUserPostsUseCase:
    """Use case for listing the posts a registered user has written."""

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        feed_settings: FeedSettings,
    ) -> None:
        self.post_service = post_service
        self.vote_service = vote_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListUserPostsRequest) -> ListUserPostsResponse:
        """Execute list user posts flow.

        Raises:
            NotFoundError: If the author ID is not a UUID
        """
        try:
            author_id = UserId(UUID(request.author_id))
        except ValueError:
            raise NotFoundError("User", request.author_id)

        limit = min(
            request.limit or self.feed_settings.default_limit,
            self.feed_settings.max_limit,
        )

        with logfire.span(
            "list_user_posts.execute",
            author_id=str(author_id),
            limit=limit,
            offset=request.offset,
        ):
            posts, total = await self.post_service.list_user_posts(
                author_id, limit=limit, offset=request.offset
            )

            my_votes = {}
            viewer = resolve_identity(request.user_id, request.anonymous_id)
            if viewer and posts:
                my_votes = await self.vote_service.get_voter_votes(
                    viewer, VotableType.POST, [post.id for post in posts]
                )

            return ListUserPostsResponse(
                user_id=str(author_id),
                posts=[PostItem.from_post(p, my_votes.get(p.id)) for p in posts],
                total=total,
                limit=limit,
                offset=request.offset,
            )
