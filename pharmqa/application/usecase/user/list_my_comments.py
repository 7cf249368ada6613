"""List the current user's comments."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pharmqa.application.usecase.base import BaseUseCase, CamelModel, PageInfo
from pharmqa.config import ForumSettings
from pharmqa.domain.service import AnswerService, CommentService
from pharmqa.domain.value import UserId


class ListMyCommentsRequest(BaseModel):
    """List my comments request."""

    user_id: UUID
    page: int = Field(default=1, ge=1)


class CommentedAnswer(CamelModel):
    """The answer a comment was left on."""

    id: str
    description: str
    question_id: str


class MyCommentItem(CamelModel):
    """One of the user's comments, with the answer it was left on."""

    id: str
    body: str
    created_at: datetime
    answer: CommentedAnswer | None


class ListMyCommentsResponse(CamelModel):
    """List my comments response."""

    comments: list[MyCommentItem]
    pagination: PageInfo


class ListMyCommentsUseCase(BaseUseCase):
    """Use case for listing the comments a user left, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        forum_settings: ForumSettings,
    ) -> None:
        self.comment_service = comment_service
        self.answer_service = answer_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListMyCommentsRequest) -> ListMyCommentsResponse:
        limit = self.forum_settings.user_content_page_size
        offset = (request.page - 1) * limit

        with logfire.span(
            "list_my_comments.execute", user_id=str(request.user_id), page=request.page
        ):
            comments, total = await self.comment_service.list_by_author(
                UserId(request.user_id), limit=limit, offset=offset
            )
            answers = await self.answer_service.get_answers_by_ids(
                list({comment.answer_id for comment in comments})
            )

            items = []
            for comment in comments:
                answer = answers.get(comment.answer_id)
                items.append(
                    MyCommentItem(
                        id=str(comment.id),
                        body=comment.body,
                        created_at=comment.created_at,
                        answer=(
                            CommentedAnswer(
                                id=str(answer.id),
                                description=answer.description,
                                question_id=str(answer.question_id),
                            )
                            if answer
                            else None
                        ),
                    )
                )

            return ListMyCommentsResponse(
                comments=items,
                pagination=PageInfo.for_page(request.page, limit, total),
            )
