"""Answer domain service."""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.model.answer import Answer
from pharmqa.domain.repository import AnswerRepository
from pharmqa.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, description: str
    ) -> Answer:
        """Create an answer with zeroed counters.

        The caller is responsible for checking that the question exists.

        Args:
            question_id: Question being answered
            author_id: Author user ID
            description: Answer body

        Returns:
            Created answer
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                description=description,
                vote_sum=0,
                comment_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def list_answers(
        self, question_id: QuestionId, limit: int, offset: int = 0
    ) -> tuple[list[Answer], int]:
        """List one page of answers to a question, best voted first.

        Args:
            question_id: Question ID
            limit: Page size
            offset: Number of answers to skip

        Returns:
            Tuple of (answers on the page, total number of answers)
        """
        with logfire.span(
            "answer_service.list_answers",
            question_id=str(question_id),
            limit=limit,
            offset=offset,
        ):
            answers = await self.answer_repository.find_by_question(
                question_id, limit=limit, offset=offset
            )
            total = await self.answer_repository.count_by_question(question_id)
            return answers, total

    async def get_answers_by_ids(
        self, answer_ids: Sequence[AnswerId]
    ) -> dict[UUID, Answer]:
        """Look up several answers at once, keyed by ID."""
        answers = await self.answer_repository.find_by_ids(answer_ids)
        return {answer.id: answer for answer in answers}

    async def count_answers_for(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[UUID, int]:
        """Count answers for each of several questions in one batch.

        Returns:
            Mapping of question ID to answer count, zero-filled
        """
        if not question_ids:
            return {}
        counts = await self.answer_repository.count_by_questions(question_ids)
        return {question_id: counts.get(question_id, 0) for question_id in question_ids}

    async def list_answer_ids(self, question_id: QuestionId) -> list[AnswerId]:
        """List the IDs of every answer to a question."""
        return await self.answer_repository.list_ids_by_question(question_id)

    async def list_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> tuple[list[Answer], int]:
        """List one page of a user's answers, newest first."""
        with logfire.span("answer_service.list_by_author", author_id=str(author_id)):
            answers = await self.answer_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            total = await self.answer_repository.count_by_author(author_id)
            return answers, total

    async def get_owned_answer(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Get an answer the user is allowed to change.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is not the answer's author
        """
        answer = await self.get_answer_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))

        if answer.author_id != user_id:
            logfire.warn(
                "Unauthorized answer change attempt",
                answer_id=str(answer_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("answer", str(answer_id), str(user_id))
        return answer

    async def update_answer(
        self, answer_id: AnswerId, user_id: UserId, description: str
    ) -> Answer:
        """Edit an answer owned by the user.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is not the answer's author
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            await self.get_owned_answer(answer_id, user_id)
            updated = await self.answer_repository.update_content(
                answer_id, description
            )
            if updated is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info("Answer updated", answer_id=str(answer_id))
            return updated

    async def delete_answer(self, answer_id: AnswerId) -> None:
        """Delete an answer row.

        Callers check ownership and remove its comments and votes first.

        Raises:
            NotFoundError: If the answer was already gone
        """
        with logfire.span("answer_service.delete_answer", answer_id=str(answer_id)):
            deleted = await self.answer_repository.delete(answer_id)
            if not deleted:
                raise NotFoundError("Answer", str(answer_id))
            logfire.info("Answer deleted", answer_id=str(answer_id))

    async def delete_answers_for_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question.

        Returns:
            Number of answers deleted
        """
        with logfire.span(
            "answer_service.delete_answers_for_question",
            question_id=str(question_id),
        ):
            deleted = await self.answer_repository.delete_by_question(question_id)
            logfire.info(
                "Answers deleted", question_id=str(question_id), deleted=deleted
            )
            return deleted
