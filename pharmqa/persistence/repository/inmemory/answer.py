"""In-memory answer repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from pharmqa.domain.model.answer import Answer
from pharmqa.domain.repository.answer import AnswerRepository
from pharmqa.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        limit: int = 3,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers to a question, best voted first, newest breaking ties."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: (a.vote_sum, a.created_at), reverse=True)
        return answers[offset : offset + limit]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        return sum(1 for a in self._answers.values() if a.question_id == question_id)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer

    async def find_vote_sum(self, votable_id: UUID) -> Optional[int]:
        """Read the current vote sum."""
        answer = self._answers.get(AnswerId(votable_id))
        return answer.vote_sum if answer else None

    async def increment_vote_sum(self, votable_id: UUID, delta: int) -> Optional[int]:
        """Atomically add delta to the vote sum."""
        answer = self._answers.get(AnswerId(votable_id))
        if answer is None:
            return None
        updated = answer.model_copy(update={"vote_sum": answer.vote_sum + delta})
        self._answers[answer.id] = updated
        return updated.vote_sum

    async def set_vote_sum(self, votable_id: UUID, vote_sum: int) -> Optional[int]:
        """Overwrite the vote sum."""
        answer = self._answers.get(AnswerId(votable_id))
        if answer is None:
            return None
        self._answers[answer.id] = answer.model_copy(update={"vote_sum": vote_sum})
        return vote_sum

    async def list_ids(self) -> list[UUID]:
        """List the IDs of all answers."""
        return list(self._answers.keys())

    async def increment_comment_count(
        self, answer_id: AnswerId, delta: int
    ) -> Optional[int]:
        """Atomically add delta to the comment count (never below 0)."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        comment_count = max(answer.comment_count + delta, 0)
        self._answers[answer_id] = answer.model_copy(
            update={"comment_count": comment_count}
        )
        return comment_count

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> list[Answer]:
        """Find several answers at once."""
        return [self._answers[a] for a in answer_ids if a in self._answers]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[UUID, int]:
        """Count answers for several questions."""
        wanted = set(question_ids)
        counts: dict[UUID, int] = {}
        for answer in self._answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def list_ids_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        """List the IDs of every answer to a question."""
        return [a.id for a in self._answers.values() if a.question_id == question_id]

    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> list[Answer]:
        """Find a user's answers, newest first."""
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's answers."""
        return sum(1 for a in self._answers.values() if a.author_id == author_id)

    async def update_content(
        self, answer_id: AnswerId, description: str
    ) -> Optional[Answer]:
        """Replace an answer's description."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        updated = answer.model_copy(
            update={"description": description, "updated_at": datetime.now()}
        )
        self._answers[answer_id] = updated
        return updated

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        doomed = await self.list_ids_by_question(question_id)
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)
