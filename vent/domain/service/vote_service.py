"""Vote domain service (the vote ledger).

Every cast is a toggle against the voter's current vote on the target:

    no vote        + v  -> insert v       (created)
    vote v         + v  -> delete         (deleted)
    vote -v        + v  -> change to v    (updated)

The counter deltas of each transition are handed to the score engine in
the same transaction.
"""

from typing import Any
from uuid import UUID, uuid4

import logfire

from vent.domain.error import NotFoundError, VoteConflictError
from vent.domain.model.vote import Vote, VoteResult
from vent.domain.repository import VoteRepository
from vent.domain.value import (
    VotableType,
    VoteId,
    VoteOutcome,
    Voter,
    VoteTarget,
    VoteValue,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .score_service import ScoreService


def counter_deltas(
    old: VoteValue | None, new: VoteValue | None
) -> tuple[int, int]:
    """Upvote and downvote deltas for moving a vote from old to new.

    None stands for "no vote".

    Returns:
        (upvote_delta, downvote_delta)
    """
    upvote_delta = int(new == VoteValue.UP) - int(old == VoteValue.UP)
    downvote_delta = int(new == VoteValue.DOWN) - int(old == VoteValue.DOWN)
    return upvote_delta, downvote_delta


def decide_transition(
    existing: VoteValue | None, requested: VoteValue
) -> tuple[VoteOutcome, VoteValue | None]:
    """Decide what a cast does given the voter's current vote.

    Returns:
        (outcome, value the voter holds afterwards or None)
    """
    if existing is None:
        return VoteOutcome.CREATED, requested
    if existing == requested:
        return VoteOutcome.DELETED, None
    return VoteOutcome.UPDATED, requested


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
        score_service: ScoreService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
            score_service: Score domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service
        self.score_service = score_service

    async def cast_vote(
        self, target: VoteTarget, voter: Voter, value: VoteValue | Any
    ) -> VoteResult:
        """Cast, flip or retract a vote.

        Args:
            target: Post or comment being voted on
            voter: Registered or anonymous voter
            value: Requested vote value (1 or -1)

        Returns:
            The outcome and the target's updated counters

        Raises:
            ValidationError: If the value is not exactly 1 or -1
            NotFoundError: If the target does not exist
            VoteConflictError: If a concurrent cast won the race twice
        """
        requested = value if isinstance(value, VoteValue) else VoteValue.parse(value)

        with logfire.span(
            "vote_service.cast_vote",
            target=str(target),
            voter=str(voter),
            value=int(requested),
        ):
            await self._ensure_target_exists(target)

            try:
                return await self._toggle(target, voter, requested)
            except VoteConflictError:
                # A concurrent first vote by the same voter got in first
                logfire.warn(
                    "Vote insert lost a race, retrying",
                    target=str(target),
                    voter=str(voter),
                )
                return await self._toggle(target, voter, requested)

    async def _ensure_target_exists(self, target: VoteTarget) -> None:
        if target.type == VotableType.POST:
            found = await self.post_service.get_post_by_id(target.post_id)
        else:
            found = await self.comment_service.get_comment_by_id(target.comment_id)

        if not found:
            logfire.warn("Vote on non-existent target", target=str(target))
            raise NotFoundError(target.type.resource, str(target.id))

    async def _toggle(
        self, target: VoteTarget, voter: Voter, requested: VoteValue
    ) -> VoteResult:
        existing = await self.vote_repository.find_by_voter_and_target(
            voter, target, for_update=True
        )
        previous = existing.value if existing else None
        outcome, resulting = decide_transition(previous, requested)

        if outcome == VoteOutcome.CREATED:
            vote = await self.vote_repository.save(
                Vote(id=VoteId(uuid4()), target=target, voter=voter, value=requested)
            )
        elif outcome == VoteOutcome.DELETED:
            await self.vote_repository.delete(existing.id)
            vote = None
        else:
            vote = await self.vote_repository.update_value(existing.id, requested)

        upvote_delta, downvote_delta = counter_deltas(previous, resulting)
        scores = await self.score_service.apply_delta(
            target, upvote_delta, downvote_delta
        )

        logfire.info(
            "Vote cast",
            outcome=outcome.value,
            target=str(target),
            voter=str(voter),
            score=scores.score,
        )
        return VoteResult(
            outcome=outcome,
            value=resulting,
            vote_id=vote.id if vote else None,
            scores=scores,
        )

    async def get_vote(self, vote_id: VoteId) -> Vote:
        """Get a vote by ID.

        Raises:
            NotFoundError: If the vote does not exist
        """
        with logfire.span("vote_service.get_vote", vote_id=str(vote_id)):
            vote = await self.vote_repository.find_by_id(vote_id)
            if not vote:
                raise NotFoundError("Vote", str(vote_id))
            return vote

    async def get_voter_votes(
        self,
        voter: Voter,
        target_type: VotableType,
        target_ids: list[UUID],
    ) -> dict[UUID, VoteValue]:
        """Look up a voter's current vote on several posts or comments.

        Args:
            voter: Registered or anonymous voter
            target_type: Type of the items
            target_ids: IDs of the items to check

        Returns:
            Mapping of item ID to vote value, for items the voter voted on
        """
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_targets(
            voter=voter,
            target_type=target_type,
            target_ids=target_ids,
        )
        return {vote.target.id: vote.value for vote in votes}

