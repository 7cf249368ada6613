"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from pharmqa.application.usecase.base import BaseUseCase
from pharmqa.application.usecase.question.create_question import QuestionResponse
from pharmqa.domain.service import QuestionService, VoteService
from pharmqa.domain.value import QuestionId, UserId, VotableType


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    Fields left as None keep their current value.
    """

    question_id: UUID
    user_id: UUID  # Current user ID (must be author)
    title: str | None = Field(default=None, max_length=300)
    description: str | None = Field(default=None, max_length=10000)

    @field_validator("title", "description")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        """Reject blank replacements; titles are stored stripped."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Question title and description cannot be empty")
        return v


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for editing one's own question."""

    def __init__(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.vote_service = vote_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionResponse:
        """Execute update question flow.

        Args:
            request: Update question request

        Returns:
            The edited question with its total and the author's own vote

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        user_id = UserId(request.user_id)
        question = await self.question_service.update_question(
            QuestionId(request.question_id),
            user_id,
            title=request.title.strip() if request.title is not None else None,
            description=request.description,
        )

        votes = await self.vote_service.get_user_votes(
            user_id, VotableType.QUESTION, [question.id]
        )
        return QuestionResponse.from_question(question, user_vote=votes.get(question.id))
