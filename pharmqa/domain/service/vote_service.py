"""Vote domain service."""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import DBAPIError, IntegrityError

from pharmqa.domain.error import (
    ConflictError,
    InvalidVoteError,
    NotFoundError,
    StorageUnavailableError,
)
from pharmqa.domain.model.vote import Vote
from pharmqa.domain.repository import VoteRepository
from pharmqa.domain.value import UserId, VotableType, VoteId, VoteTally, VoteValue

from .base import Service
from .counter_service import CounterService

# Unique constraint over (user_id, votable_type, votable_id)
UNIQUE_VOTE_CONSTRAINT = "unique_vote"

# PostgreSQL SQLSTATE for foreign_key_violation
FOREIGN_KEY_VIOLATION = "23503"


class VoteService(Service):
    """Domain service for tri-state voting on questions and answers.

    A user's vote on an item moves between three states (no vote, upvoted,
    downvoted). Each cast stores the requested state and applies the signed
    difference to the item's vote sum, keeping

        item.vote_sum == sum(vote.value for votes on item)

    without ever recomputing the sum.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            counter_service: Counter domain service
        """
        self.vote_repository = vote_repository
        self.counter_service = counter_service

    @staticmethod
    def validate_value(value: object) -> VoteValue:
        """Check a requested vote value against {-1, 0, 1}.

        Args:
            value: Raw requested value

        Returns:
            The value as a VoteValue

        Raises:
            InvalidVoteError: If the value is outside the domain
        """
        if isinstance(value, bool) or value not in (-1, 0, 1):
            raise InvalidVoteError(value)
        return VoteValue(value)

    async def cast_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        value: int,
    ) -> VoteTally:
        """Set a user's vote on a question or answer.

        Casting the value the user already holds is a no-op, not a toggle;
        only a cast of 0 removes a vote.

        Args:
            user_id: Voting user
            votable_type: Type of item
            votable_id: ID of the item
            value: Requested vote (-1, 0 or 1)

        Returns:
            The item's new total and the user's resulting vote (None for 0)

        Raises:
            InvalidVoteError: If value is outside {-1, 0, 1}
            NotFoundError: If the item or the voting user does not exist
            ConflictError: If a concurrent write could not be resolved
            StorageUnavailableError: If the database failed
        """
        requested = self.validate_value(value)

        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            value=int(requested),
        ):
            try:
                # Raises NotFoundError before any vote record is touched
                total_votes = await self.counter_service.get_vote_sum(
                    votable_type, votable_id
                )

                try:
                    delta = await self._store_vote(
                        user_id, votable_type, votable_id, requested
                    )
                except (IntegrityError, _VoteVanishedError) as e:
                    self._raise_unless_race(e, user_id)
                    logfire.warn(
                        "Concurrent vote write, retrying once",
                        user_id=str(user_id),
                        votable_type=votable_type.value,
                        votable_id=str(votable_id),
                    )
                    try:
                        delta = await self._store_vote(
                            user_id, votable_type, votable_id, requested
                        )
                    except (IntegrityError, _VoteVanishedError) as retry_error:
                        self._raise_unless_race(retry_error, user_id)
                        logfire.error(
                            "Vote conflict persisted after retry",
                            user_id=str(user_id),
                            votable_id=str(votable_id),
                        )
                        raise ConflictError(
                            "Vote changed concurrently, please retry"
                        ) from retry_error

                if delta != 0:
                    total_votes = await self.counter_service.apply_vote_delta(
                        votable_type, votable_id, delta
                    )
            except DBAPIError as e:
                logfire.error(
                    "Storage unavailable while casting vote",
                    votable_id=str(votable_id),
                    error=str(e),
                )
                raise StorageUnavailableError("Vote storage is unavailable") from e

            user_vote = None if requested == VoteValue.NONE else int(requested)
            logfire.info(
                "Vote cast",
                user_id=str(user_id),
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                delta=delta,
                total_votes=total_votes,
            )
            return VoteTally(total_votes=total_votes, user_vote=user_vote)

    async def _store_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        requested: VoteValue,
    ) -> int:
        """Move the user's vote record to the requested state.

        Updates and deletes are compare-and-set against the value read here,
        so the returned delta always matches the row change actually made.

        Returns:
            The delta to apply to the item's vote sum

        Raises:
            IntegrityError: If another request created the vote first
            _VoteVanishedError: If another request changed or deleted the
                vote after it was read
        """
        existing_vote = await self.vote_repository.find_by_user_and_votable(
            user_id, votable_type, votable_id
        )
        existing = existing_vote.value if existing_vote else VoteValue.NONE

        if requested == existing:
            return 0

        if existing_vote is None:
            now = datetime.now()
            await self.vote_repository.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    value=int(requested),
                    created_at=now,
                    updated_at=now,
                )
            )
        elif requested == VoteValue.NONE:
            deleted = await self.vote_repository.delete(
                existing_vote.id, existing_vote.value
            )
            if not deleted:
                raise _VoteVanishedError(str(existing_vote.id))
        else:
            updated = await self.vote_repository.update_value(
                existing_vote.id, existing_vote.value, int(requested)
            )
            if updated is None:
                raise _VoteVanishedError(str(existing_vote.id))

        return int(requested) - int(existing)

    @staticmethod
    def _raise_unless_race(error: Exception, user_id: UserId) -> None:
        """Re-raise write failures that a retry cannot fix.

        Only a unique_vote violation or a vanished vote means a concurrent
        cast by the same user; anything else is final.

        Raises:
            NotFoundError: If the voting user has no user record
            IntegrityError: For any other constraint violation
        """
        if isinstance(error, _VoteVanishedError):
            return
        if _violated_constraint(error) == UNIQUE_VOTE_CONSTRAINT:
            return
        if _sqlstate(error) == FOREIGN_KEY_VIOLATION:
            logfire.warn("Vote by unknown user", user_id=str(user_id))
            raise NotFoundError("User", str(user_id)) from error
        raise error

    async def delete_votes_for(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> int:
        """Delete all votes on items that are being deleted.

        Args:
            votable_type: Type of items
            votable_ids: Item IDs

        Returns:
            Number of votes deleted
        """
        with logfire.span(
            "vote_service.delete_votes_for",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            deleted = await self.vote_repository.delete_by_votables(
                votable_type, votable_ids
            )
            logfire.info(
                "Votes deleted", votable_type=votable_type.value, deleted=deleted
            )
            return deleted

    async def get_vote_state(
        self,
        user_id: UserId | None,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> VoteTally:
        """Read an item's vote total and the user's own vote.

        Args:
            user_id: Current user, or None for anonymous readers
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Current total and the user's vote (None if anonymous or not voted)

        Raises:
            NotFoundError: If the item does not exist
        """
        total_votes = await self.counter_service.get_vote_sum(votable_type, votable_id)

        user_vote = None
        if user_id is not None:
            vote = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )
            user_vote = vote.value if vote else None

        return VoteTally(total_votes=total_votes, user_vote=user_vote)

    async def get_user_votes(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Look up a user's votes on several items at once.

        Args:
            user_id: User ID
            votable_type: Type of items
            votable_ids: Item IDs to check

        Returns:
            Mapping of item ID to vote value, for items the user voted on
        """
        if not votable_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_votables(
            user_id=user_id,
            votable_type=votable_type,
            votable_ids=votable_ids,
        )
        return {vote.votable_id: vote.value for vote in votes}


class _VoteVanishedError(Exception):
    """A vote read earlier in the same cast was changed or deleted before the write."""


def _violated_constraint(error: Exception) -> str | None:
    """Name of the constraint behind an IntegrityError, if the driver reports it."""
    orig = getattr(error, "orig", None)
    # asyncpg errors are chained behind SQLAlchemy's adapted exception
    for source in (orig, getattr(orig, "__cause__", None), getattr(orig, "diag", None)):
        name = getattr(source, "constraint_name", None)
        if name:
            return name
    if orig is not None and f'"{UNIQUE_VOTE_CONSTRAINT}"' in str(orig):
        return UNIQUE_VOTE_CONSTRAINT
    return None


def _sqlstate(error: Exception) -> str | None:
    """SQLSTATE code behind a DBAPIError, if the driver reports it."""
    orig = getattr(error, "orig", None)
    for source in (orig, getattr(orig, "__cause__", None)):
        code = getattr(source, "sqlstate", None) or getattr(source, "pgcode", None)
        if code:
            return code
    return None
