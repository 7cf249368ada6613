"""Denormalized counter domain service.

Sole writer of Question.vote_sum, Answer.vote_sum and Answer.comment_count.
All changes are applied as atomic storage-level increments; the counters are
never recomputed on the request path.
"""

from uuid import UUID

import logfire

from pharmqa.domain.error import NotFoundError
from pharmqa.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VotableRepository,
    VoteRepository,
)
from pharmqa.domain.value import AnswerId, VotableType

from .base import Service


class CounterService(Service):
    """Domain service maintaining denormalized aggregates."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize counter service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            vote_repository: Vote repository (used for reconciliation only)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository

    def _votable_repository(self, votable_type: VotableType) -> VotableRepository:
        """Select the repository holding the counters for a votable type."""
        repositories: dict[VotableType, VotableRepository] = {
            VotableType.QUESTION: self.question_repository,
            VotableType.ANSWER: self.answer_repository,
        }
        return repositories[votable_type]

    async def get_vote_sum(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Read the current vote sum of an item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Current vote sum

        Raises:
            NotFoundError: If the item does not exist
        """
        vote_sum = await self._votable_repository(votable_type).find_vote_sum(
            votable_id
        )
        if vote_sum is None:
            raise NotFoundError(votable_type.resource_name, str(votable_id))
        return vote_sum

    async def apply_vote_delta(
        self, votable_type: VotableType, votable_id: UUID, delta: int
    ) -> int:
        """Atomically add a delta to an item's vote sum.

        Uses a storage-level increment so concurrent deltas from different
        voters compose regardless of order.

        Args:
            votable_type: Type of item
            votable_id: ID of the item
            delta: Signed amount to add (-2..2 for a single vote change)

        Returns:
            The new vote sum

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "counter_service.apply_vote_delta",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            delta=delta,
        ):
            vote_sum = await self._votable_repository(votable_type).increment_vote_sum(
                votable_id, delta
            )
            if vote_sum is None:
                logfire.warn(
                    "Vote delta on non-existent item",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                )
                raise NotFoundError(votable_type.resource_name, str(votable_id))

            logfire.info(
                "Vote sum updated",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                delta=delta,
                vote_sum=vote_sum,
            )
            return vote_sum

    async def apply_comment_delta(self, answer_id: AnswerId, delta: int) -> int:
        """Atomically add a delta to an answer's comment count.

        Args:
            answer_id: Answer ID
            delta: +1 on comment creation, -1 on deletion

        Returns:
            The new comment count

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "counter_service.apply_comment_delta",
            answer_id=str(answer_id),
            delta=delta,
        ):
            comment_count = await self.answer_repository.increment_comment_count(
                answer_id, delta
            )
            if comment_count is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Comment count updated",
                answer_id=str(answer_id),
                delta=delta,
                comment_count=comment_count,
            )
            return comment_count

    async def reconcile_vote_sum(
        self, votable_type: VotableType, votable_id: UUID
    ) -> int:
        """Recompute an item's vote sum from its vote records and store it.

        Repair tool for drift introduced outside the voting path; must not be
        used by request handlers.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            The reconciled vote sum

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "counter_service.reconcile_vote_sum",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            repository = self._votable_repository(votable_type)
            stored = await repository.find_vote_sum(votable_id)
            if stored is None:
                raise NotFoundError(votable_type.resource_name, str(votable_id))

            actual = await self.vote_repository.sum_by_votable(votable_type, votable_id)
            if actual != stored:
                logfire.warn(
                    "Vote sum drift detected",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                    stored=stored,
                    actual=actual,
                )
                await repository.set_vote_sum(votable_id, actual)

            return actual

    async def reconcile_all_vote_sums(self, votable_type: VotableType) -> int:
        """Reconcile every item of a type.

        Args:
            votable_type: Type of item

        Returns:
            Number of items whose stored vote sum was corrected
        """
        corrected = 0
        for votable_id in await self._votable_repository(votable_type).list_ids():
            stored = await self.get_vote_sum(votable_type, votable_id)
            if await self.reconcile_vote_sum(votable_type, votable_id) != stored:
                corrected += 1
        logfire.info(
            "Vote sums reconciled", votable_type=votable_type.value, corrected=corrected
        )
        return corrected
