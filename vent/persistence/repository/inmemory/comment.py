"""In-memory comment repository for testing."""

from typing import Optional

from vent.domain.model import Comment, VoteCounters
from vent.domain.repository.comment import CommentRepository
from vent.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID (no locking in memory)."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, highest score first, then oldest."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: (-c.score, c.created_at))

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_scores(
        self, comment_id: CommentId, counters: VoteCounters
    ) -> Comment:
        """Write vote counters."""
        updated = self._comments[comment_id].model_copy(
            update={
                "upvotes": counters.upvotes,
                "downvotes": counters.downvotes,
                "score": counters.score,
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def sum_score_by_author(self, author_id: UserId) -> int:
        """Sum the score of a user's comments."""
        return sum(
            c.score for c in self._comments.values() if c.author_id == author_id
        )
