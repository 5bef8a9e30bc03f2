"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vent.domain.model import Post, VoteCounters
from vent.domain.repository.post import PostRepository, PostSortOrder
from vent.domain.value import Category, PostId, UserId
from vent.persistence.mappers import post_to_dict, row_to_post
from vent.persistence.tables import posts_table

_SORT_COLUMNS = {
    PostSortOrder.HOT: (desc(posts_table.c.hot_score), desc(posts_table.c.created_at)),
    PostSortOrder.TOP: (desc(posts_table.c.score), desc(posts_table.c.created_at)),
    PostSortOrder.NEW: (desc(posts_table.c.created_at),),
}


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, locking its row."""
        stmt = (
            select(posts_table).where(posts_table.c.id == post_id).with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        category: Optional[Category] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)
            if category:
                stmt = stmt.where(posts_table.c.category == category.value)
            stmt = stmt.order_by(*_SORT_COLUMNS[sort]).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(self, category: Optional[Category] = None) -> int:
        """Count posts, optionally within one category."""
        stmt = select(func.count()).select_from(posts_table)
        if category:
            stmt = stmt.where(posts_table.c.category == category.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update_scores(
        self, post_id: PostId, counters: VoteCounters, hot_score: float
    ) -> Post:
        """Write vote counters and hot score in a single UPDATE."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                upvotes=counters.upvotes,
                downvotes=counters.downvotes,
                score=counters.score,
                hot_score=hot_score,
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        return row_to_post(result.one()._asdict())

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)

    async def sum_score_by_author(self, author_id: UserId) -> int:
        """Sum the score of a user's posts."""
        stmt = select(func.coalesce(func.sum(posts_table.c.score), 0)).where(
            posts_table.c.author_id == author_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Post]:
        """Find a user's posts, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's posts."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
