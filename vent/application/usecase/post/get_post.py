"""Get post use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from vent.application.usecase.identity import parse_target_id, resolve_identity
from vent.domain.error import NotFoundError
from vent.domain.model import Post
from vent.domain.service import PostService, VoteService
from vent.domain.value import Category, PostId, VotableType, VoteValue


class PostItem(BaseModel):
    """A post as shown to clients.

    ``my_vote`` is the requesting voter's current vote (1, -1) or null.
    """

    post_id: str
    frustration: str
    identity: str
    category: Category
    upvotes: int
    downvotes: int
    score: int
    hot_score: float
    comment_count: int
    created_at: datetime
    my_vote: int | None = None

    @classmethod
    def from_post(cls, post: Post, my_vote: VoteValue | None = None) -> "PostItem":
        return cls(
            post_id=str(post.id),
            frustration=post.frustration,
            identity=post.identity,
            category=post.category,
            upvotes=post.upvotes,
            downvotes=post.downvotes,
            score=post.score,
            hot_score=post.hot_score,
            comment_count=post.comment_count,
            created_at=post.created_at,
            my_vote=int(my_vote) if my_vote is not None else None,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    user_id: str | None = None  # Current user ID (if authenticated)
    anonymous_id: Any = None


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService, vote_service: VoteService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.vote_service = vote_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_target_id(request.post_id, "Post"))
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        my_vote = None
        viewer = resolve_identity(request.user_id, request.anonymous_id)
        if viewer:
            votes = await self.vote_service.get_voter_votes(
                viewer, VotableType.POST, [post.id]
            )
            my_vote = votes.get(post.id)

        return PostItem.from_post(post, my_vote)
