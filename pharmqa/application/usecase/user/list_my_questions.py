"""List the current user's questions."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pharmqa.application.usecase.base import BaseUseCase, CamelModel, PageInfo
from pharmqa.config import ForumSettings
from pharmqa.domain.service import AnswerService, QuestionService
from pharmqa.domain.value import UserId


class ListMyQuestionsRequest(BaseModel):
    """List my questions request."""

    user_id: UUID
    page: int = Field(default=1, ge=1)


class MyQuestionItem(CamelModel):
    """One of the user's questions."""

    id: str
    title: str
    description: str
    total_votes: int
    total_answers: int
    created_at: datetime


class ListMyQuestionsResponse(CamelModel):
    """List my questions response."""

    questions: list[MyQuestionItem]
    pagination: PageInfo


class ListMyQuestionsUseCase(BaseUseCase):
    """Use case for listing the questions a user asked, newest first."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        forum_settings: ForumSettings,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.forum_settings = forum_settings

    async def execute(
        self, request: ListMyQuestionsRequest
    ) -> ListMyQuestionsResponse:
        limit = self.forum_settings.user_content_page_size
        offset = (request.page - 1) * limit

        with logfire.span(
            "list_my_questions.execute", user_id=str(request.user_id), page=request.page
        ):
            questions, total = await self.question_service.list_by_author(
                UserId(request.user_id), limit=limit, offset=offset
            )
            answer_counts = await self.answer_service.count_answers_for(
                [question.id for question in questions]
            )

            return ListMyQuestionsResponse(
                questions=[
                    MyQuestionItem(
                        id=str(q.id),
                        title=q.title,
                        description=q.description,
                        total_votes=q.vote_sum,
                        total_answers=answer_counts.get(q.id, 0),
                        created_at=q.created_at,
                    )
                    for q in questions
                ],
                pagination=PageInfo.for_page(request.page, limit, total),
            )
