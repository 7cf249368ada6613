"""Delete answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.service import AnswerService, CommentService, VoteService
from pharmqa.domain.value import AnswerId, UserId, VotableType


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: UUID
    user_id: UUID  # Current user ID (must be author)


class DeleteAnswerResponse(CamelModel):
    """Delete answer response."""

    answer_id: str
    question_id: str
    deleted_comments: int


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for deleting one's own answer with its comments and votes."""

    def __init__(
        self,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Comments go first, then votes, then the answer, all in the request's
        transaction.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is not the answer's author
        """
        answer_id = AnswerId(request.answer_id)

        with logfire.span(
            "delete_answer.execute",
            answer_id=str(answer_id),
            user_id=str(request.user_id),
        ):
            answer = await self.answer_service.get_owned_answer(
                answer_id, UserId(request.user_id)
            )

            deleted_comments = await self.comment_service.delete_comments_for_answers(
                [answer_id]
            )
            await self.vote_service.delete_votes_for(VotableType.ANSWER, [answer_id])
            await self.answer_service.delete_answer(answer_id)

            return DeleteAnswerResponse(
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
                deleted_comments=deleted_comments,
            )
