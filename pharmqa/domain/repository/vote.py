"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from pharmqa.domain.model.vote import Vote
from pharmqa.domain.value import UserId, VotableType, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    The source of truth for individual votes. At most one vote exists per
    (user, votable_type, votable_id).
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
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            votable_type: Type of items
            votable_ids: Item IDs to check

        Returns:
            Votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Create a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user and item
        """
        pass

    @abstractmethod
    async def update_value(
        self, vote_id: VoteId, expected_value: int, value: int
    ) -> Optional[Vote]:
        """Change a vote's value if it still holds the expected value.

        Compare-and-set: a vote changed by a concurrent request since it was
        read is left untouched.

        Args:
            vote_id: The vote ID
            expected_value: Value the caller read (-1 or 1)
            value: New value (-1 or 1)

        Returns:
            The updated vote, or None if no vote with that ID still holds
            expected_value
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId, expected_value: int) -> bool:
        """Delete a vote if it still holds the expected value.

        Args:
            vote_id: The vote ID to delete
            expected_value: Value the caller read (-1 or 1)

        Returns:
            True if the vote was deleted, False if it was gone or changed
        """
        pass

    @abstractmethod
    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items.

        Used when the items themselves are deleted.

        Args:
            votable_type: Type of items
            votable_ids: Item IDs

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def sum_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Sum the values of all votes on an item.

        Used to reconcile the denormalized vote sum, never on the voting path.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Sum of vote values (0 if no votes)
        """
        pass
