"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from pharmqa.domain.model.vote import Vote
from pharmqa.domain.repository.vote import VoteRepository
from pharmqa.domain.value import UserId, VotableType, VoteId


class UniqueViolation(Exception):
    """Driver-level error carried by IntegrityError on a duplicate vote."""

    sqlstate = "23505"

    def __init__(self, constraint_name: str) -> None:
        self.constraint_name = constraint_name
        super().__init__(
            f'duplicate key value violates unique constraint "{constraint_name}"'
        )


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Mirrors the unique_vote constraint by raising IntegrityError on a
    duplicate (user, votable) pair.
    """

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_id
            ):
                return vote
        return None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        for existing in self._votes.values():
            if (
                existing.user_id == vote.user_id
                and existing.votable_type == vote.votable_type
                and existing.votable_id == vote.votable_id
            ):
                raise IntegrityError(
                    "INSERT INTO votes", None, UniqueViolation("unique_vote")
                )

        self._votes[vote.id] = vote
        return vote

    async def update_value(
        self, vote_id: VoteId, expected_value: int, value: int
    ) -> Optional[Vote]:
        """Change a vote's value if it still holds expected_value."""
        vote = self._votes.get(vote_id)
        if vote is None or vote.value != expected_value:
            return None
        updated = vote.model_copy(update={"value": value, "updated_at": datetime.now()})
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId, expected_value: int) -> bool:
        """Delete a vote if it still holds expected_value."""
        vote = self._votes.get(vote_id)
        if vote is None or vote.value != expected_value:
            return False
        del self._votes[vote_id]
        return True

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items."""
        wanted = set(votable_ids)
        doomed = [
            vote_id
            for vote_id, v in self._votes.items()
            if v.votable_type == votable_type and v.votable_id in wanted
        ]
        for vote_id in doomed:
            del self._votes[vote_id]
        return len(doomed)

    async def sum_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Sum the values of all votes on an item."""
        return sum(
            v.value
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_id
        )
