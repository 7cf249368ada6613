"""Answer repository interface."""

from abc import abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from pharmqa.domain.model.answer import Answer
from pharmqa.domain.repository.votable import VotableRepository
from pharmqa.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(VotableRepository):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        limit: int = 3,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question, best voted first.

        Ordered by vote_sum descending, then newest first.

        Args:
            question_id: The question ID
            limit: Maximum number of answers to return
            offset: Number of answers to skip

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question.

        Args:
            question_id: The question ID

        Returns:
            Number of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Create an answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def increment_comment_count(
        self, answer_id: AnswerId, delta: int
    ) -> Optional[int]:
        """Atomically add delta to the comment count (never below 0).

        Args:
            answer_id: The answer ID
            delta: Signed amount to add

        Returns:
            The new comment count, or None if the answer does not exist
        """
        pass

    @abstractmethod
    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> List[Answer]:
        """Find several answers at once; missing IDs are skipped."""
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[UUID, int]:
        """Count answers for several questions in one query.

        Returns:
            Mapping of question ID to answer count; questions without answers
            may be absent
        """
        pass

    @abstractmethod
    async def list_ids_by_question(self, question_id: QuestionId) -> List[AnswerId]:
        """List the IDs of every answer to a question."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> List[Answer]:
        """Find a user's answers, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's answers."""
        pass

    @abstractmethod
    async def update_content(
        self, answer_id: AnswerId, description: str
    ) -> Optional[Answer]:
        """Replace an answer's description.

        Counters are left untouched.

        Returns:
            The updated answer, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer row.

        Its comments and votes must already be gone.

        Returns:
            True if an answer was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question.

        Returns:
            Number of answers deleted
        """
        pass
