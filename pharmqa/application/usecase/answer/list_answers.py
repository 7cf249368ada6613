"""List answers use case."""

import math
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pharmqa.application.usecase.answer.create_answer import AnswerResponse
from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.config import ForumSettings
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.service import AnswerService, QuestionService, VoteService
from pharmqa.domain.value import QuestionId, UserId, VotableType


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: UUID
    page: int = Field(default=1, ge=1)
    user_id: UUID | None = None  # Current user ID (if authenticated)


class PaginationInfo(CamelModel):
    """Page position within a question's answers."""

    current_page: int
    total_pages: int
    total_answers: int
    remaining_answers: int
    has_more: bool


class ListAnswersResponse(CamelModel):
    """List answers response."""

    answers: list[AnswerResponse]
    pagination: PaginationInfo


class ListAnswersUseCase(BaseUseCase):
    """Use case for paging through a question's answers, best voted first."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            vote_service: Vote domain service
            forum_settings: Forum settings (page size)
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.vote_service = vote_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Totals and comment counts come from the denormalized counters; the
        user's own votes are fetched in one batch for the whole page.

        Args:
            request: List answers request

        Returns:
            One page of answers with pagination info

        Raises:
            NotFoundError: If the question does not exist
        """
        limit = self.forum_settings.answers_page_size
        offset = (request.page - 1) * limit

        with logfire.span(
            "list_answers.execute",
            question_id=str(request.question_id),
            page=request.page,
            limit=limit,
        ):
            question_id = QuestionId(request.question_id)
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            answers, total = await self.answer_service.list_answers(
                question_id, limit=limit, offset=offset
            )

            user_votes: dict[UUID, int] = {}
            if request.user_id is not None and answers:
                user_votes = await self.vote_service.get_user_votes(
                    user_id=UserId(request.user_id),
                    votable_type=VotableType.ANSWER,
                    votable_ids=[answer.id for answer in answers],
                )

            total_pages = math.ceil(total / limit)
            logfire.info("Answers listed", count=len(answers), total=total)

            return ListAnswersResponse(
                answers=[
                    AnswerResponse.from_answer(a, user_vote=user_votes.get(a.id))
                    for a in answers
                ],
                pagination=PaginationInfo(
                    current_page=request.page,
                    total_pages=total_pages,
                    total_answers=total,
                    remaining_answers=max(0, total - request.page * limit),
                    has_more=request.page < total_pages,
                ),
            )
