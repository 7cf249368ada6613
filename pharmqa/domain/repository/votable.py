"""Votable repository interface.

Shared contract for every entity that carries a denormalized vote_sum.
Each VotableType maps to one implementation of this contract.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID


class VotableRepository(ABC):
    """Counter accessors for a votable entity."""

    @abstractmethod
    async def find_vote_sum(self, votable_id: UUID) -> Optional[int]:
        """Read the current vote sum.

        Args:
            votable_id: ID of the item

        Returns:
            The vote sum, or None if the item does not exist
        """
        pass

    @abstractmethod
    async def increment_vote_sum(self, votable_id: UUID, delta: int) -> Optional[int]:
        """Atomically add delta to the vote sum.

        Must be a single storage-level increment, never a read followed by
        a write in application code.

        Args:
            votable_id: ID of the item
            delta: Signed amount to add

        Returns:
            The new vote sum, or None if the item does not exist
        """
        pass

    @abstractmethod
    async def set_vote_sum(self, votable_id: UUID, vote_sum: int) -> Optional[int]:
        """Overwrite the vote sum (reconciliation only).

        Args:
            votable_id: ID of the item
            vote_sum: Recomputed vote sum

        Returns:
            The stored vote sum, or None if the item does not exist
        """
        pass

    @abstractmethod
    async def list_ids(self) -> List[UUID]:
        """List the IDs of all items of this type."""
        pass
