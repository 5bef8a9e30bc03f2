"""Integration tests for the PostgreSQL vote ledger.

Needs a reachable Postgres at DATABASE__URL; run with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from vent.domain.error import VoteConflictError
from vent.domain.model import Vote, VoteCounters
from vent.domain.repository import PostRepository, VoteRepository
from vent.domain.value import VotableType, VoteId, Voter, VoteTarget, VoteValue
from vent.persistence.tables import metadata
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def schema(integration_env):
    """Create the tables if they do not exist yet."""
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    return integration_env


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_conflict_and_keeps_session(self, schema):
        """The unique constraint only rolls back the savepoint."""
        # Arrange
        post_repo = await schema.get(PostRepository)
        vote_repo = await schema.get(VoteRepository)
        post = await post_repo.save(make_post())
        target = VoteTarget.post(post.id)
        voter = Voter.anonymous(str(uuid4()))
        await vote_repo.save(
            Vote(id=VoteId(uuid4()), target=target, voter=voter, value=VoteValue.UP)
        )

        # Act & Assert
        with pytest.raises(VoteConflictError):
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    target=target,
                    voter=voter,
                    value=VoteValue.DOWN,
                )
            )

        existing = await vote_repo.find_by_voter_and_target(
            voter, target, for_update=True
        )
        assert existing.value == VoteValue.UP

    @pytest.mark.asyncio
    async def test_voter_votes_round_trip_through_columns(self, schema):
        post_repo = await schema.get(PostRepository)
        vote_repo = await schema.get(VoteRepository)
        post = await post_repo.save(make_post())
        user_voter = Voter.registered(uuid4())
        await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                target=VoteTarget.post(post.id),
                voter=user_voter,
                value=VoteValue.DOWN,
            )
        )

        votes = await vote_repo.find_by_voter_and_targets(
            user_voter, VotableType.POST, [post.id]
        )

        assert len(votes) == 1
        assert votes[0].voter == user_voter
        assert votes[0].value == VoteValue.DOWN

    @pytest.mark.asyncio
    async def test_update_scores_returns_written_row(self, schema):
        post_repo = await schema.get(PostRepository)
        post = await post_repo.save(make_post())

        updated = await post_repo.update_scores(
            post.id, VoteCounters(upvotes=2, downvotes=1, score=1), 7.5
        )

        assert (updated.upvotes, updated.downvotes, updated.score) == (2, 1, 1)
        assert updated.hot_score == 7.5
