"""Create question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.model.question import Question
from pharmqa.domain.service import QuestionService
from pharmqa.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: UUID  # User ID from authenticated user
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)


class QuestionResponse(CamelModel):
    """Question with its vote state."""

    id: str
    author_id: str
    title: str
    description: str
    total_votes: int
    user_vote: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(
        cls, question: Question, user_vote: int | None = None
    ) -> "QuestionResponse":
        """Build the response for a question."""
        return cls(
            id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            description=question.description,
            total_votes=question.vote_sum,
            user_vote=user_vote,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            The new question, with no votes
        """
        question = await self.question_service.create_question(
            author_id=UserId(request.author_id),
            title=request.title.strip(),
            description=request.description,
        )
        return QuestionResponse.from_question(question)
