"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from vent.domain.error import VoteConflictError
from vent.domain.model.vote import Vote
from vent.domain.repository.vote import VoteRepository
from vent.domain.value import VotableType, Voter, VoteTarget, VoteId, VoteValue


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_voter_and_target(
        self,
        voter: Voter,
        target: VoteTarget,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item."""
        for vote in self._votes.values():
            if vote.voter == voter and vote.target == target:
                return vote
        return None

    async def find_by_voter_and_targets(
        self,
        voter: Voter,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a voter's votes on multiple items (batch query)."""
        wanted = set(target_ids)
        return [
            v
            for v in self._votes.values()
            if v.voter == voter
            and v.target.type == target_type
            and v.target.id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            VoteConflictError: If the voter already voted on the target
        """
        if await self.find_by_voter_and_target(vote.voter, vote.target):
            raise VoteConflictError(str(vote.target), str(vote.voter))

        self._votes[vote.id] = vote
        return vote

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Vote:
        """Change a vote's value."""
        updated = self._votes[vote_id].model_copy(update={"value": value})
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes.pop(vote_id, None)
