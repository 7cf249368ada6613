"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.application.usecase.comment.create_comment import CommentResponse
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.service import AnswerService, CommentService
from pharmqa.domain.value import AnswerId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    answer_id: UUID


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    comments: list[CommentResponse]
    total_comments: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the comments on an answer."""

    def __init__(
        self, comment_service: CommentService, answer_service: AnswerService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            answer_service: Answer domain service
        """
        self.comment_service = comment_service
        self.answer_service = answer_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Comments newest first, with the answer's comment count

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer_id = AnswerId(request.answer_id)

        answer = await self.answer_service.get_answer_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))

        comments = await self.comment_service.get_comments_for_answer(answer_id)
        return GetCommentsResponse(
            comments=[CommentResponse.from_comment(c) for c in comments],
            total_comments=answer.comment_count,
        )
