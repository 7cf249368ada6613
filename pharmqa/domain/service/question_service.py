"""Question domain service."""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.model.question import Question
from pharmqa.domain.repository import QuestionRepository
from pharmqa.domain.value import QuestionId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self, author_id: UserId, title: str, description: str
    ) -> Question:
        """Create a question with a zero vote sum.

        Args:
            author_id: Author user ID
            title: Question title
            description: Question body

        Returns:
            Created question
        """
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                author_id=author_id,
                title=title,
                description=description,
                vote_sum=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def get_questions_by_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[UUID, Question]:
        """Look up several questions at once, keyed by ID."""
        questions = await self.question_repository.find_by_ids(question_ids)
        return {question.id: question for question in questions}

    async def list_questions(
        self, limit: int, offset: int = 0
    ) -> tuple[list[Question], int]:
        """List one page of the question feed, newest first.

        Args:
            limit: Page size
            offset: Number of questions to skip

        Returns:
            Tuple of (questions on the page, total number of questions)
        """
        with logfire.span(
            "question_service.list_questions", limit=limit, offset=offset
        ):
            questions = await self.question_repository.find_recent(
                limit=limit, offset=offset
            )
            total = await self.question_repository.count()
            return questions, total

    async def list_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> tuple[list[Question], int]:
        """List one page of a user's questions, newest first."""
        with logfire.span(
            "question_service.list_by_author", author_id=str(author_id)
        ):
            questions = await self.question_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            total = await self.question_repository.count_by_author(author_id)
            return questions, total

    async def get_owned_question(
        self, question_id: QuestionId, user_id: UserId
    ) -> Question:
        """Get a question the user is allowed to change.

        Args:
            question_id: Question ID
            user_id: ID of the user asking to change it

        Returns:
            The question

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        question = await self.get_question_by_id(question_id)
        if not question:
            raise NotFoundError("Question", str(question_id))

        if question.author_id != user_id:
            logfire.warn(
                "Unauthorized question change attempt",
                question_id=str(question_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("question", str(question_id), str(user_id))
        return question

    async def update_question(
        self,
        question_id: QuestionId,
        user_id: UserId,
        title: str | None = None,
        description: str | None = None,
    ) -> Question:
        """Edit a question owned by the user.

        Fields left as None keep their current value.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_owned_question(question_id, user_id)
            updated = await self.question_repository.update_content(
                question_id,
                title=title if title is not None else question.title,
                description=(
                    description if description is not None else question.description
                ),
            )
            if updated is None:
                raise NotFoundError("Question", str(question_id))

            logfire.info("Question updated", question_id=str(question_id))
            return updated

    async def delete_question(self, question_id: QuestionId) -> None:
        """Delete a question row.

        Callers check ownership and remove answers, comments and votes first.

        Raises:
            NotFoundError: If the question was already gone
        """
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            deleted = await self.question_repository.delete(question_id)
            if not deleted:
                raise NotFoundError("Question", str(question_id))
            logfire.info("Question deleted", question_id=str(question_id))
