"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from vent.domain.model.vote import Vote
from vent.domain.value import VotableType, Voter, VoteTarget, VoteId, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    The vote ledger is the only writer of vote rows. Implementations must
    enforce at most one vote per (target, voter) pair.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_target(
        self,
        voter: Voter,
        target: VoteTarget,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific post or comment.

        Args:
            voter: Registered or anonymous voter
            target: Post or comment
            for_update: Lock the vote row until the transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self,
        voter: Voter,
        target_type: VotableType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple items (batch query).

        Args:
            voter: Registered or anonymous voter
            target_type: Type of items (post or comment)
            target_ids: IDs of the items to check

        Returns:
            Votes by the voter on the specified items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            VoteConflictError: If the voter already has a vote on the target
        """
        pass

    @abstractmethod
    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Vote:
        """Change the direction of an existing vote.

        Args:
            vote_id: The vote ID
            value: New vote value

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass
