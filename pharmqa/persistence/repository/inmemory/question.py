"""In-memory question repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from pharmqa.domain.model.question import Question
from pharmqa.domain.repository.question import QuestionRepository
from pharmqa.domain.value import QuestionId, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Counter updates complete without awaiting, so they are atomic with
    respect to other coroutines on the event loop.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def find_vote_sum(self, votable_id: UUID) -> Optional[int]:
        """Read the current vote sum."""
        question = self._questions.get(QuestionId(votable_id))
        return question.vote_sum if question else None

    async def increment_vote_sum(self, votable_id: UUID, delta: int) -> Optional[int]:
        """Atomically add delta to the vote sum."""
        question = self._questions.get(QuestionId(votable_id))
        if question is None:
            return None
        updated = question.model_copy(update={"vote_sum": question.vote_sum + delta})
        self._questions[question.id] = updated
        return updated.vote_sum

    async def set_vote_sum(self, votable_id: UUID, vote_sum: int) -> Optional[int]:
        """Overwrite the vote sum."""
        question = self._questions.get(QuestionId(votable_id))
        if question is None:
            return None
        self._questions[question.id] = question.model_copy(
            update={"vote_sum": vote_sum}
        )
        return vote_sum

    async def list_ids(self) -> list[UUID]:
        """List the IDs of all questions."""
        return list(self._questions.keys())

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find several questions at once."""
        return [self._questions[q] for q in question_ids if q in self._questions]

    async def find_recent(self, limit: int, offset: int = 0) -> list[Question]:
        """Find questions, newest first."""
        questions = sorted(
            self._questions.values(), key=lambda q: q.created_at, reverse=True
        )
        return questions[offset : offset + limit]

    async def count(self) -> int:
        """Count all questions."""
        return len(self._questions)

    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> list[Question]:
        """Find a user's questions, newest first."""
        questions = [q for q in self._questions.values() if q.author_id == author_id]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's questions."""
        return sum(1 for q in self._questions.values() if q.author_id == author_id)

    async def update_content(
        self, question_id: QuestionId, title: str, description: str
    ) -> Optional[Question]:
        """Replace a question's title and description."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(
            update={
                "title": title,
                "description": description,
                "updated_at": datetime.now(),
            }
        )
        self._questions[question_id] = updated
        return updated

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None
