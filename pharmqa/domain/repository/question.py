"""Question repository interface."""

from abc import abstractmethod
from typing import List, Optional, Sequence

from pharmqa.domain.model.question import Question
from pharmqa.domain.repository.votable import VotableRepository
from pharmqa.domain.value import QuestionId, UserId


class QuestionRepository(VotableRepository):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Create a question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> List[Question]:
        """Find several questions at once; missing IDs are skipped."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int, offset: int = 0) -> List[Question]:
        """Find questions, newest first.

        Args:
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all questions."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> List[Question]:
        """Find a user's questions, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's questions."""
        pass

    @abstractmethod
    async def update_content(
        self, question_id: QuestionId, title: str, description: str
    ) -> Optional[Question]:
        """Replace a question's title and description.

        Counters are left untouched.

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question row.

        Answers, comments and votes must already be gone.

        Returns:
            True if a question was deleted, False if it did not exist
        """
        pass
