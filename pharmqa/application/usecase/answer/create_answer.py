"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.model.answer import Answer
from pharmqa.domain.service import AnswerService, QuestionService
from pharmqa.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: UUID
    author_id: UUID  # User ID from authenticated user
    description: str = Field(min_length=1, max_length=10000)


class AnswerResponse(CamelModel):
    """Answer with its vote state and comment count."""

    id: str
    question_id: str
    author_id: str
    description: str
    total_votes: int
    user_vote: int | None = None
    total_comments: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_answer(
        cls, answer: Answer, user_vote: int | None = None
    ) -> "AnswerResponse":
        """Build the response for an answer from its denormalized counters."""
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            description=answer.description,
            total_votes=answer.vote_sum,
            user_vote=user_vote,
            total_comments=answer.comment_count,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Verify question exists
        2. Create answer with zeroed counters

        Args:
            request: Create answer request

        Returns:
            The new answer

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(request.question_id)

        question = await self.question_service.get_question_by_id(question_id)
        if not question:
            raise NotFoundError("Question", str(question_id))

        answer = await self.answer_service.create_answer(
            question_id=question_id,
            author_id=UserId(request.author_id),
            description=request.description,
        )
        return AnswerResponse.from_answer(answer)
