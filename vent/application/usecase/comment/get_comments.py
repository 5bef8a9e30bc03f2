"""Get comments use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from vent.application.usecase.identity import parse_target_id, resolve_identity
from vent.domain.error import NotFoundError
from vent.domain.model import Comment
from vent.domain.service import CommentService, PostService, VoteService
from vent.domain.value import PostId, VotableType, VoteValue


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    post_id: str
    parent_id: str | None
    content: str
    depth: int
    upvotes: int
    downvotes: int
    score: int
    created_at: datetime
    my_vote: int | None = None

    @classmethod
    def from_comment(
        cls, comment: Comment, my_vote: VoteValue | None = None
    ) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            depth=comment.depth,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            created_at=comment.created_at,
            my_vote=int(my_vote) if my_vote is not None else None,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str
    user_id: str | None = None
    anonymous_id: Any = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting all comments on a post with the viewer's votes."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote service for the viewer's vote state
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_target_id(request.post_id, "Post"))
        if not await self.post_service.get_post_by_id(post_id):
            raise NotFoundError("Post", request.post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)

        my_votes = {}
        viewer = resolve_identity(request.user_id, request.anonymous_id)
        if viewer and comments:
            my_votes = await self.vote_service.get_voter_votes(
                viewer, VotableType.COMMENT, [c.id for c in comments]
            )

        return GetCommentsResponse(
            post_id=str(post_id),
            comments=[CommentItem.from_comment(c, my_votes.get(c.id)) for c in comments],
            total=len(comments),
        )
