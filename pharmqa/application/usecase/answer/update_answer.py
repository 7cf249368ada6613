"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from pharmqa.application.usecase.answer.create_answer import AnswerResponse
from pharmqa.application.usecase.base import BaseUseCase
from pharmqa.domain.service import AnswerService, VoteService
from pharmqa.domain.value import AnswerId, UserId, VotableType


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: UUID
    user_id: UUID  # Current user ID (must be author)
    description: str = Field(min_length=1, max_length=10000)

    @field_validator("description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Answer cannot be empty")
        return v


class UpdateAnswerUseCase(BaseUseCase):
    """Use case for editing one's own answer."""

    def __init__(self, answer_service: AnswerService, vote_service: VoteService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
            vote_service: Vote domain service
        """
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerResponse:
        """Execute update answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is not the answer's author
        """
        user_id = UserId(request.user_id)
        answer = await self.answer_service.update_answer(
            AnswerId(request.answer_id), user_id, request.description
        )

        votes = await self.vote_service.get_user_votes(
            user_id, VotableType.ANSWER, [answer.id]
        )
        return AnswerResponse.from_answer(answer, user_vote=votes.get(answer.id))
