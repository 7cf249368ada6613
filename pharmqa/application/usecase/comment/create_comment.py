"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.model.comment import Comment
from pharmqa.domain.service import AnswerService, CommentService, CounterService
from pharmqa.domain.value import AnswerId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    answer_id: UUID
    author_id: UUID  # User ID from authenticated user
    body: str = Field(min_length=1, max_length=10000)

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank comments."""
        v = v.strip()
        if not v:
            raise ValueError("Comment body cannot be empty")
        return v


class CommentResponse(CamelModel):
    """Comment details."""

    id: str
    answer_id: str
    author_id: str
    body: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        """Build the response for a comment."""
        return cls(
            id=str(comment.id),
            answer_id=str(comment.answer_id),
            author_id=str(comment.author_id),
            body=comment.body,
            created_at=comment.created_at,
        )


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    comment: CommentResponse
    total_comments: int


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        counter_service: CounterService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            answer_service: Answer domain service
            counter_service: Counter domain service
        """
        self.comment_service = comment_service
        self.answer_service = answer_service
        self.counter_service = counter_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify answer exists via answer service
        2. Create comment via comment service
        3. Increment the answer's comment count via counter service

        Args:
            request: Create comment request

        Returns:
            The new comment and the answer's updated comment count

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer_id = AnswerId(request.answer_id)

        answer = await self.answer_service.get_answer_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))

        comment = await self.comment_service.create_comment(
            answer_id=answer_id,
            author_id=UserId(request.author_id),
            body=request.body,
        )

        total_comments = await self.counter_service.apply_comment_delta(answer_id, 1)

        return CreateCommentResponse(
            comment=CommentResponse.from_comment(comment),
            total_comments=total_comments,
        )
