"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.service import CommentService, CounterService
from pharmqa.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    user_id: UUID  # User ID from authenticated user


class DeleteCommentResponse(CamelModel):
    """Delete comment response."""

    comment_id: str
    answer_id: str
    total_comments: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment."""

    def __init__(
        self, comment_service: CommentService, counter_service: CounterService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            counter_service: Counter domain service
        """
        self.comment_service = comment_service
        self.counter_service = counter_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            The deleted comment's IDs and the answer's updated comment count

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
        """
        comment = await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        total_comments = await self.counter_service.apply_comment_delta(
            comment.answer_id, -1
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id),
            answer_id=str(comment.answer_id),
            total_comments=total_comments,
        )
