"""Comment domain service."""

from uuid import uuid4

import logfire

from vent.domain.error import NotFoundError, ValidationError
from vent.domain.model.comment import MAX_COMMENT_DEPTH, Comment
from vent.domain.repository import CommentRepository
from vent.domain.value import CommentId, PostId, Voter

from .base import Service
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, post_service: PostService
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
        """
        self.comment_repository = comment_repository
        self.post_service = post_service

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        author: Voter | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            content: Comment text
            author: Registered or anonymous author (None if unknown)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or parent comment does not exist
            ValidationError: If the reply is on another post or nested too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author=str(author) if author else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            # If replying, verify parent exists and calculate depth
            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")
                depth = parent.depth + 1
                if depth > MAX_COMMENT_DEPTH:
                    raise ValidationError(
                        f"Replies can be nested at most {MAX_COMMENT_DEPTH} levels deep"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                author_id=author.user_id if author else None,
                anonymous_id=author.anonymous_id if author else None,
            )

            saved = await self.comment_repository.save(comment)
            await self.post_service.increment_comment_count(post_id)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)

            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))

            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments on a post, highest score first, then oldest."""
        with logfire.span("comment_service.get_comments_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved", post_id=str(post_id), count=len(comments)
            )
            return comments
