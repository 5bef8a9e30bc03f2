"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from vent.domain.model.post import Post
from vent.domain.model.score import VoteCounters
from vent.domain.value import Category, PostId, UserId


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    HOT = "hot"  # hot_score DESC, created_at DESC
    TOP = "top"  # score DESC
    NEW = "new"  # created_at DESC


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID and lock its row until the transaction ends.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        category: Optional[Category] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination.

        Args:
            sort: Sort order (hot, top or new)
            category: Filter by category (None for all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[Category] = None) -> int:
        """Count posts, optionally within one category."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_scores(
        self, post_id: PostId, counters: VoteCounters, hot_score: float
    ) -> Post:
        """Write a post's vote counters and hot score.

        Only the score engine calls this.

        Args:
            post_id: The post ID
            counters: New upvotes, downvotes and score
            hot_score: New hot score

        Returns:
            The updated post
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1.

        Args:
            post_id: The post ID
        """
        pass

    @abstractmethod
    async def sum_score_by_author(self, author_id: UserId) -> int:
        """Sum the score of every post written by a registered user.

        Args:
            author_id: The author's user ID

        Returns:
            Sum of scores (0 if the user has no posts)
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Post]:
        """Find a registered user's posts, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of the user's posts
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count a registered user's posts."""
        pass
