"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vent.domain.model import Comment, VoteCounters
from vent.domain.repository.comment import CommentRepository
from vent.domain.value import CommentId, PostId, UserId
from vent.persistence.mappers import comment_to_dict, row_to_comment
from vent.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, locking its row."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, highest score first, then oldest."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(
                comments_table.c.score.desc(), comments_table.c.created_at.asc()
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_scores(
        self, comment_id: CommentId, counters: VoteCounters
    ) -> Comment:
        """Write vote counters in a single UPDATE."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                upvotes=counters.upvotes,
                downvotes=counters.downvotes,
                score=counters.score,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        return row_to_comment(result.one()._asdict())

    async def sum_score_by_author(self, author_id: UserId) -> int:
        """Sum the score of a user's comments."""
        stmt = select(func.coalesce(func.sum(comments_table.c.score), 0)).where(
            comments_table.c.author_id == author_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
