"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vent.domain.error import VoteConflictError
from vent.domain.model import Vote
from vent.domain.repository import VoteRepository
from vent.domain.value import VotableType, Voter, VoteTarget, VoteId, VoteValue
from vent.persistence.mappers import row_to_vote, vote_to_dict
from vent.persistence.tables import votes_table


def _target_clause(target: VoteTarget):
    if target.type == VotableType.POST:
        return votes_table.c.post_id == target.id
    return votes_table.c.comment_id == target.id


def _voter_clause(voter: Voter):
    if voter.user_id is not None:
        return votes_table.c.user_id == voter.user_id
    return votes_table.c.anonymous_id == voter.anonymous_id.root


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_target(
        self,
        voter: Voter,
        target: VoteTarget,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(_target_clause(target), _voter_clause(voter))
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_targets(
        self,
        voter: Voter,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        column = (
            votes_table.c.post_id
            if target_type == VotableType.POST
            else votes_table.c.comment_id
        )
        stmt = select(votes_table).where(
            and_(_voter_clause(voter), column.in_(target_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote inside a savepoint.

        A unique constraint violation only rolls back the savepoint, so
        the caller's transaction stays usable for a retry.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise VoteConflictError(str(vote.target), str(vote.voter))
        return vote

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Vote:
        """Change a vote's value."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(value=int(value))
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        return row_to_vote(result.one()._asdict())

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
