"""Get question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase
from pharmqa.application.usecase.question.create_question import QuestionResponse
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.service import QuestionService, VoteService
from pharmqa.domain.value import QuestionId, UserId, VotableType


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID
    user_id: UUID | None = None  # Current user ID (if authenticated)


class GetQuestionUseCase(BaseUseCase):
    """Use case for reading a single question."""

    def __init__(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> QuestionResponse:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            Question with its total and the user's vote

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("get_question.execute", question_id=str(request.question_id)):
            question_id = QuestionId(request.question_id)
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            user_vote = None
            if request.user_id is not None:
                votes = await self.vote_service.get_user_votes(
                    UserId(request.user_id),
                    VotableType.QUESTION,
                    [question.id],
                )
                user_vote = votes.get(question.id)

            return QuestionResponse.from_question(question, user_vote=user_vote)
