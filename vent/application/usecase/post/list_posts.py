"""List posts use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from vent.application.usecase.identity import resolve_identity
from vent.application.usecase.post.get_post import PostItem
from vent.config import FeedSettings
from vent.domain.repository import PostSortOrder
from vent.domain.service import PostService, VoteService
from vent.domain.value import Category, VotableType


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSortOrder = PostSortOrder.HOT
    category: Category | None = None
    limit: int | None = Field(default=None, ge=1)  # None means the feed default
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)
    anonymous_id: Any = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for listing posts with sorting, filtering and pagination."""

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
            feed_settings: Page size limits
        """
        self.post_service = post_service
        self.vote_service = vote_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Page sizes above the configured maximum are capped, not rejected.
        """
        limit = min(
            request.limit or self.feed_settings.default_limit,
            self.feed_settings.max_limit,
        )

        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            category=request.category.value if request.category else None,
            limit=limit,
            offset=request.offset,
        ):
            posts, total = await self.post_service.list_posts(
                sort=request.sort,
                category=request.category,
                limit=limit,
                offset=request.offset,
            )

            my_votes = {}
            viewer = resolve_identity(request.user_id, request.anonymous_id)
            if viewer and posts:
                my_votes = await self.vote_service.get_voter_votes(
                    viewer, VotableType.POST, [post.id for post in posts]
                )

            items = [PostItem.from_post(post, my_votes.get(post.id)) for post in posts]
            logfire.info("Posts listed", count=len(items), total=total)

            return ListPostsResponse(
                posts=items, total=total, limit=limit, offset=request.offset
            )
