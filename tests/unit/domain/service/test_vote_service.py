"""Unit tests for VoteService (the vote ledger)."""

from uuid import uuid4

import pytest

from vent.domain.error import NotFoundError, ValidationError, VoteConflictError
from vent.domain.model import Vote
from vent.domain.repository import CommentRepository, PostRepository, VoteRepository
from vent.domain.service import VoteService, counter_deltas, decide_transition
from vent.domain.value import (
    UserId,
    VotableType,
    VoteId,
    VoteOutcome,
    Voter,
    VoteTarget,
    VoteValue,
)
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

UP = VoteValue.UP
DOWN = VoteValue.DOWN


class TestDecideTransition:
    """Tests for the toggle state machine."""

    def test_no_vote_creates(self):
        assert decide_transition(None, UP) == (VoteOutcome.CREATED, UP)

    def test_same_value_deletes(self):
        assert decide_transition(DOWN, DOWN) == (VoteOutcome.DELETED, None)

    def test_opposite_value_updates(self):
        assert decide_transition(UP, DOWN) == (VoteOutcome.UPDATED, DOWN)


class TestCounterDeltas:
    """Tests for counter_deltas."""

    @pytest.mark.parametrize(
        "old, new, expected",
        [
            (None, UP, (1, 0)),
            (None, DOWN, (0, 1)),
            (UP, None, (-1, 0)),
            (DOWN, None, (0, -1)),
            (UP, DOWN, (-1, 1)),
            (DOWN, UP, (1, -1)),
        ],
    )
    def test_deltas(self, old, new, expected):
        assert counter_deltas(old, new) == expected


async def _seed_post(unit_env):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post())


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_first_upvote_creates_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post = await _seed_post(unit_env)
        voter = Voter.registered(UserId(uuid4()))
        target = VoteTarget.post(post.id)

        result = await vote_service.cast_vote(target, voter, 1)

        assert result.outcome == VoteOutcome.CREATED
        assert result.value == UP
        assert result.vote_id is not None
        assert (result.scores.upvotes, result.scores.downvotes) == (1, 0)
        assert result.scores.score == 1

        saved = await vote_repo.find_by_voter_and_target(voter, target)
        assert saved.id == result.vote_id
        assert saved.value == UP

    @pytest.mark.asyncio
    async def test_repeating_a_vote_removes_it(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post = await _seed_post(unit_env)
        voter = Voter.anonymous("device-1")
        target = VoteTarget.post(post.id)

        await vote_service.cast_vote(target, voter, UP)
        result = await vote_service.cast_vote(target, voter, UP)

        assert result.outcome == VoteOutcome.DELETED
        assert result.value is None
        assert result.vote_id is None
        assert (result.scores.upvotes, result.scores.downvotes) == (0, 0)
        assert await vote_repo.find_by_voter_and_target(voter, target) is None

    @pytest.mark.asyncio
    async def test_opposite_vote_flips_it(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post = await _seed_post(unit_env)
        voter = Voter.anonymous("device-1")
        target = VoteTarget.post(post.id)

        created = await vote_service.cast_vote(target, voter, UP)
        result = await vote_service.cast_vote(target, voter, DOWN)

        assert result.outcome == VoteOutcome.UPDATED
        assert result.value == DOWN
        assert result.vote_id == created.vote_id
        assert (result.scores.upvotes, result.scores.downvotes) == (0, 1)
        assert result.scores.score == -1

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_counters(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await _seed_post(unit_env)
        target = VoteTarget.post(post.id)
        voter = Voter.registered(UserId(uuid4()))

        await vote_service.cast_vote(target, voter, DOWN)
        await vote_service.cast_vote(target, voter, DOWN)

        stored = await post_repo.find_by_id(post.id)
        assert (stored.upvotes, stored.downvotes, stored.score) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_counters_match_ledger_after_many_voters(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post = await _seed_post(unit_env)
        target = VoteTarget.post(post.id)

        casts = [
            ("a", UP),
            ("b", UP),
            ("c", DOWN),
            ("a", DOWN),
            ("b", UP),
            ("d", DOWN),
            ("c", UP),
        ]
        result = None
        for anon, value in casts:
            result = await vote_service.cast_vote(
                target, Voter.anonymous(anon), value
            )

        ledger = [
            await vote_repo.find_by_voter_and_target(Voter.anonymous(anon), target)
            for anon in "abcd"
        ]
        values = [vote.value for vote in ledger if vote is not None]
        ups, downs = values.count(UP), values.count(DOWN)
        assert (result.scores.upvotes, result.scores.downvotes) == (ups, downs)
        assert result.scores.score == ups - downs

    @pytest.mark.asyncio
    async def test_registered_and_anonymous_votes_are_separate(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post = await _seed_post(unit_env)
        target = VoteTarget.post(post.id)

        await vote_service.cast_vote(target, Voter.registered(UserId(uuid4())), UP)
        result = await vote_service.cast_vote(target, Voter.anonymous("device"), UP)

        assert result.outcome == VoteOutcome.CREATED
        assert result.scores.upvotes == 2

    @pytest.mark.asyncio
    async def test_vote_on_comment(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post.id))

        result = await vote_service.cast_vote(
            VoteTarget.comment(comment.id), Voter.anonymous("device"), DOWN
        )

        assert result.outcome == VoteOutcome.CREATED
        assert result.scores.hot_score is None
        assert result.scores.score == -1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [0, 2, -2, 1.0, True, "1", None])
    async def test_invalid_value_rejected_before_store_access(self, unit_env, value):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post = await _seed_post(unit_env)
        target = VoteTarget.post(post.id)

        with pytest.raises(ValidationError):
            await vote_service.cast_vote(target, Voter.anonymous("device"), value)

        stored = await vote_repo.find_by_voter_and_target(
            Voter.anonymous("device"), target
        )
        assert stored is None

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="^Post not found$"):
            await vote_service.cast_vote(
                VoteTarget.post(uuid4()), Voter.anonymous("device"), UP
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="^Comment not found$"):
            await vote_service.cast_vote(
                VoteTarget.comment(uuid4()), Voter.anonymous("device"), UP
            )


class _RacingVoteRepository:
    """Wraps a vote repository so the first lookups miss a concurrent insert.

    Simulates another request inserting the same voter's first vote
    between this request's read and its insert.
    """

    def __init__(self, inner: VoteRepository, rival: Vote, races: int = 1):
        self.inner = inner
        self.rival = rival
        self.races = races

    async def find_by_voter_and_target(self, voter, target, for_update=False):
        if self.races > 0:
            self.races -= 1
            # The rival commits after our read
            found = await self.inner.find_by_voter_and_target(voter, target)
            if found is None:
                await self.inner.save(self.rival)
            return found
        return await self.inner.find_by_voter_and_target(voter, target)

    def __getattr__(self, name):
        return getattr(self.inner, name)


class TestCastVoteConflicts:
    """Tests for lost insert races."""

    @pytest.mark.asyncio
    async def test_lost_race_is_retried_against_the_winning_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post = await _seed_post(unit_env)
        target = VoteTarget.post(post.id)
        voter = Voter.anonymous("device")
        rival = Vote(id=VoteId(uuid4()), target=target, voter=voter, value=UP)
        vote_service.vote_repository = _RacingVoteRepository(
            vote_service.vote_repository, rival
        )

        result = await vote_service.cast_vote(target, voter, UP)

        # The retry sees the rival's identical vote and toggles it off
        assert result.outcome == VoteOutcome.DELETED

    @pytest.mark.asyncio
    async def test_second_conflict_propagates(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await _seed_post(unit_env)
        vote_service.vote_repository = _AlwaysConflictingVoteRepository()

        with pytest.raises(VoteConflictError):
            await vote_service.cast_vote(
                VoteTarget.post(post.id), Voter.anonymous("device"), UP
            )

        stored = await post_repo.find_by_id(post.id)
        assert stored.upvotes == 0


class _AlwaysConflictingVoteRepository:
    """Never sees an existing vote but every insert collides."""

    def __init__(self):
        self.attempts = 0

    async def find_by_voter_and_target(self, voter, target, for_update=False):
        return None

    async def save(self, vote):
        self.attempts += 1
        raise VoteConflictError(str(vote.target), str(vote.voter))


class TestGetVote:
    """Tests for get_vote and get_voter_votes."""

    @pytest.mark.asyncio
    async def test_get_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post = await _seed_post(unit_env)
        result = await vote_service.cast_vote(
            VoteTarget.post(post.id), Voter.anonymous("device"), DOWN
        )

        vote = await vote_service.get_vote(result.vote_id)

        assert vote.value == DOWN
        assert vote.target.id == post.id

    @pytest.mark.asyncio
    async def test_get_missing_vote_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Vote not found"):
            await vote_service.get_vote(VoteId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_voter_votes_maps_voted_items_only(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        voted_up = await _seed_post(unit_env)
        voted_down = await _seed_post(unit_env)
        untouched = await _seed_post(unit_env)
        voter = Voter.anonymous("device")
        await vote_service.cast_vote(VoteTarget.post(voted_up.id), voter, UP)
        await vote_service.cast_vote(VoteTarget.post(voted_down.id), voter, DOWN)

        votes = await vote_service.get_voter_votes(
            voter, VotableType.POST, [voted_up.id, voted_down.id, untouched.id]
        )

        assert votes == {voted_up.id: UP, voted_down.id: DOWN}

    @pytest.mark.asyncio
    async def test_get_voter_votes_with_no_ids(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_voter_votes(
            Voter.anonymous("device"), VotableType.POST, []
        ) == {}


class TestVotingScenarios:
    """Walkthroughs of the main voting flows."""

    @pytest.mark.asyncio
    async def test_first_vote_then_repeat_on_post(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        post = await _seed_post(unit_env)
        target = VoteTarget.post(post.id)
        voter = Voter.anonymous("anon-abc")

        first = await vote_service.cast_vote(target, voter, 1)
        assert first.outcome == VoteOutcome.CREATED
        assert (first.scores.upvotes, first.scores.score) == (1, 1)

        second = await vote_service.cast_vote(target, voter, 1)
        assert second.outcome == VoteOutcome.DELETED
        assert (second.scores.upvotes, second.scores.score) == (0, 0)

    @pytest.mark.asyncio
    async def test_flip_on_popular_comment_swings_score_by_two(self, unit_env):
        """A user who upvoted a 7/2 comment switches to a downvote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        comment = await comment_repo.save(
            make_comment(post.id, upvotes=7, downvotes=2, score=5)
        )
        target = VoteTarget.comment(comment.id)
        voter = Voter.registered(UserId(uuid4()))
        await vote_repo.save(
            Vote(id=VoteId(uuid4()), target=target, voter=voter, value=UP)
        )

        # Act
        result = await vote_service.cast_vote(target, voter, -1)

        # Assert
        assert result.outcome == VoteOutcome.UPDATED
        assert (result.scores.upvotes, result.scores.downvotes) == (6, 3)
        assert result.scores.score == 3
