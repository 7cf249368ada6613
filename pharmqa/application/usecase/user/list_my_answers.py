"""List the current user's answers."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pharmqa.application.usecase.base import BaseUseCase, CamelModel, PageInfo
from pharmqa.config import ForumSettings
from pharmqa.domain.service import AnswerService, QuestionService
from pharmqa.domain.value import UserId


class ListMyAnswersRequest(BaseModel):
    """List my answers request."""

    user_id: UUID
    page: int = Field(default=1, ge=1)


class AnsweredQuestion(CamelModel):
    """The question an answer belongs to."""

    id: str
    title: str


class MyAnswerItem(CamelModel):
    """One of the user's answers, with the question it answers."""

    id: str
    description: str
    total_votes: int
    total_comments: int
    created_at: datetime
    question: AnsweredQuestion | None


class ListMyAnswersResponse(CamelModel):
    """List my answers response."""

    answers: list[MyAnswerItem]
    pagination: PageInfo


class ListMyAnswersUseCase(BaseUseCase):
    """Use case for listing the answers a user wrote, newest first."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        forum_settings: ForumSettings,
    ) -> None:
        self.answer_service = answer_service
        self.question_service = question_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListMyAnswersRequest) -> ListMyAnswersResponse:
        """Execute list my answers flow.

        Question titles for the whole page are fetched in one batch.
        """
        limit = self.forum_settings.user_content_page_size
        offset = (request.page - 1) * limit

        with logfire.span(
            "list_my_answers.execute", user_id=str(request.user_id), page=request.page
        ):
            answers, total = await self.answer_service.list_by_author(
                UserId(request.user_id), limit=limit, offset=offset
            )
            questions = await self.question_service.get_questions_by_ids(
                list({answer.question_id for answer in answers})
            )

            items = []
            for answer in answers:
                question = questions.get(answer.question_id)
                items.append(
                    MyAnswerItem(
                        id=str(answer.id),
                        description=answer.description,
                        total_votes=answer.vote_sum,
                        total_comments=answer.comment_count,
                        created_at=answer.created_at,
                        question=(
                            AnsweredQuestion(id=str(question.id), title=question.title)
                            if question
                            else None
                        ),
                    )
                )

            return ListMyAnswersResponse(
                answers=items,
                pagination=PageInfo.for_page(request.page, limit, total),
            )
