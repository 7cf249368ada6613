"""Delete question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    VoteService,
)
from pharmqa.domain.value import QuestionId, UserId, VotableType


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: UUID
    user_id: UUID  # Current user ID (must be author)


class DeleteQuestionResponse(CamelModel):
    """Delete question response."""

    question_id: str
    deleted_answers: int
    deleted_comments: int


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting one's own question together with its thread.

    Everything runs in the request's transaction, so a failure at any step
    leaves the thread untouched.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Steps:
        1. Check the user wrote the question
        2. Delete comments on its answers
        3. Delete votes on its answers
        4. Delete its answers
        5. Delete votes on the question
        6. Delete the question

        Args:
            request: Delete question request

        Returns:
            The deleted question's ID and how many answers and comments went

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        question_id = QuestionId(request.question_id)

        with logfire.span(
            "delete_question.execute",
            question_id=str(question_id),
            user_id=str(request.user_id),
        ):
            await self.question_service.get_owned_question(
                question_id, UserId(request.user_id)
            )

            answer_ids = await self.answer_service.list_answer_ids(question_id)
            deleted_comments = await self.comment_service.delete_comments_for_answers(
                answer_ids
            )
            await self.vote_service.delete_votes_for(VotableType.ANSWER, answer_ids)
            deleted_answers = await self.answer_service.delete_answers_for_question(
                question_id
            )
            await self.vote_service.delete_votes_for(
                VotableType.QUESTION, [question_id]
            )
            await self.question_service.delete_question(question_id)

            return DeleteQuestionResponse(
                question_id=str(question_id),
                deleted_answers=deleted_answers,
                deleted_comments=deleted_comments,
            )
