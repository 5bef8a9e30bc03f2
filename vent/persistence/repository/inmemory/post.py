"""In-memory post repository for testing."""

from typing import Optional

from vent.domain.model import Post, VoteCounters
from vent.domain.repository.post import PostRepository, PostSortOrder
from vent.domain.value import Category, PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID (no locking in memory)."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        category: Optional[Category] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = list(self._posts.values())

        if category is not None:
            posts = [p for p in posts if p.category == category]

        if sort == PostSortOrder.HOT:
            posts.sort(key=lambda p: (p.hot_score, p.created_at), reverse=True)
        elif sort == PostSortOrder.TOP:
            posts.sort(key=lambda p: (p.score, p.created_at), reverse=True)
        else:
            posts.sort(key=lambda p: p.created_at, reverse=True)

        return posts[offset : offset + limit]

    async def count(self, category: Optional[Category] = None) -> int:
        """Count posts, optionally within one category."""
        return sum(
            1 for p in self._posts.values() if category is None or p.category == category
        )

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        self._posts[post.id] = post
        return post

    async def update_scores(
        self, post_id: PostId, counters: VoteCounters, hot_score: float
    ) -> Post:
        """Write vote counters and hot score."""
        updated = self._posts[post_id].model_copy(
            update={
                "upvotes": counters.upvotes,
                "downvotes": counters.downvotes,
                "score": counters.score,
                "hot_score": hot_score,
            }
        )
        self._posts[post_id] = updated
        return updated

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment comment_count by 1."""
        post = self._posts[post_id]
        self._posts[post_id] = post.model_copy(
            update={"comment_count": post.comment_count + 1}
        )

    async def sum_score_by_author(self, author_id: UserId) -> int:
        """Sum the score of a user's posts."""
        return sum(p.score for p in self._posts.values() if p.author_id == author_id)

    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Post]:
        """Find a user's posts, newest first."""
        posts = [p for p in self._posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's posts."""
        return sum(1 for p in self._posts.values() if p.author_id == author_id)
