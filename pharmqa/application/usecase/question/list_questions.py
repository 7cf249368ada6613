"""List questions use case (the question feed)."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pharmqa.application.usecase.base import BaseUseCase, CamelModel, PageInfo
from pharmqa.config import ForumSettings
from pharmqa.domain.model.question import Question
from pharmqa.domain.service import AnswerService, QuestionService, VoteService
from pharmqa.domain.value import UserId, VotableType


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    user_id: UUID | None = None  # Current user ID (if authenticated)


class QuestionListItem(CamelModel):
    """Question in the feed."""

    id: str
    author_id: str
    title: str
    description: str
    total_votes: int
    user_vote: int | None = None
    total_answers: int
    created_at: datetime

    @classmethod
    def from_question(
        cls, question: Question, total_answers: int, user_vote: int | None = None
    ) -> "QuestionListItem":
        return cls(
            id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            description=question.description,
            total_votes=question.vote_sum,
            user_vote=user_vote,
            total_answers=total_answers,
            created_at=question.created_at,
        )


class ListQuestionsResponse(CamelModel):
    """List questions response."""

    questions: list[QuestionListItem]
    pagination: PageInfo


class ListQuestionsUseCase(BaseUseCase):
    """Use case for paging through all questions, newest first."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
            forum_settings: Forum settings (page size)
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Totals come from the denormalized vote sums. Answer counts and the
        user's own votes are each fetched in one batch for the whole page.

        Args:
            request: List questions request

        Returns:
            One page of questions with pagination info
        """
        limit = self.forum_settings.questions_page_size
        offset = (request.page - 1) * limit

        with logfire.span("list_questions.execute", page=request.page, limit=limit):
            questions, total = await self.question_service.list_questions(
                limit=limit, offset=offset
            )
            question_ids = [question.id for question in questions]
            answer_counts = await self.answer_service.count_answers_for(question_ids)

            user_votes: dict[UUID, int] = {}
            if request.user_id is not None and questions:
                user_votes = await self.vote_service.get_user_votes(
                    user_id=UserId(request.user_id),
                    votable_type=VotableType.QUESTION,
                    votable_ids=question_ids,
                )

            logfire.info("Questions listed", count=len(questions), total=total)

            return ListQuestionsResponse(
                questions=[
                    QuestionListItem.from_question(
                        q,
                        total_answers=answer_counts.get(q.id, 0),
                        user_vote=user_votes.get(q.id),
                    )
                    for q in questions
                ],
                pagination=PageInfo.for_page(request.page, limit, total),
            )
