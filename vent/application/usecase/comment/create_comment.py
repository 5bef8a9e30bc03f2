"""Create comment use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from vent.application.usecase.comment.get_comments import CommentItem
from vent.application.usecase.identity import parse_target_id, resolve_identity
from vent.domain.error import ValidationError
from vent.domain.service import CommentService
from vent.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str = Field(min_length=1, max_length=2000)
    parent_id: str | None = None  # Parent comment for replies
    anonymous_id: Any = None
    user_id: str | None = None  # From the auth cookie, if signed in


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or parent comment does not exist
            ValidationError: If the content or reply nesting is invalid
        """
        content = request.content.strip()
        if not content:
            raise ValidationError("content must not be blank")

        post_id = PostId(parse_target_id(request.post_id, "Post"))
        parent_id = None
        if request.parent_id:
            try:
                parent_id = CommentId(UUID(request.parent_id))
            except ValueError:
                raise ValidationError("parent_id must be a UUID")

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            content=content,
            author=resolve_identity(request.user_id, request.anonymous_id),
            parent_id=parent_id,
        )
        return CommentItem.from_comment(comment)
