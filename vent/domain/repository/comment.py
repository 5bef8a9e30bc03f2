"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from vent.domain.model.comment import Comment
from vent.domain.model.score import VoteCounters
from vent.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID and lock its row until the transaction ends."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, highest score first, then oldest.

        Args:
            post_id: The post's ID

        Returns:
            List of comments on the post
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        pass

    @abstractmethod
    async def update_scores(
        self, comment_id: CommentId, counters: VoteCounters
    ) -> Comment:
        """Write a comment's vote counters.

        Only the score engine calls this.

        Args:
            comment_id: The comment ID
            counters: New upvotes, downvotes and score

        Returns:
            The updated comment
        """
        pass

    @abstractmethod
    async def sum_score_by_author(self, author_id: UserId) -> int:
        """Sum the score of every comment written by a registered user."""
        pass
