"""Unit tests for the answer use cases."""

from uuid import uuid4

import pytest

from pharmqa.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.repository import AnswerRepository, QuestionRepository
from pharmqa.domain.service import VoteService
from pharmqa.domain.value import VotableType
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAnswerUseCase:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_new_answer_starts_with_zero_counters(self, unit_env, user_id):
        """A new answer has no votes and no comments."""
        use_case = await unit_env.get(CreateAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        response = await use_case.execute(
            CreateAnswerRequest(
                question_id=question.id,
                author_id=str(user_id),
                description="Use the Cockcroft-Gault equation.",
            )
        )

        assert response.question_id == str(question.id)
        assert response.total_votes == 0
        assert response.user_vote is None
        assert response.total_comments == 0

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env, user_id):
        """Answering a missing question should raise NotFoundError."""
        use_case = await unit_env.get(CreateAnswerUseCase)

        with pytest.raises(NotFoundError, match="Question not found"):
            await use_case.execute(
                CreateAnswerRequest(
                    question_id=uuid4(),
                    author_id=str(user_id),
                    description="Orphan",
                )
            )


class TestListAnswersUseCase:
    """Tests for ListAnswersUseCase."""

    @pytest.mark.asyncio
    async def test_orders_by_votes_then_newest(self, unit_env):
        """Higher vote sums come first; ties go to the newer answer."""
        use_case = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())

        older_tied = await answer_repo.save(
            make_answer(question.id, vote_sum=2, age_minutes=60)
        )
        newer_tied = await answer_repo.save(
            make_answer(question.id, vote_sum=2, age_minutes=5)
        )
        best = await answer_repo.save(make_answer(question.id, vote_sum=7))
        await answer_repo.save(make_answer(question.id, vote_sum=-3))

        response = await use_case.execute(ListAnswersRequest(question_id=question.id))

        assert [a.id for a in response.answers] == [
            str(best.id),
            str(newer_tied.id),
            str(older_tied.id),
        ]

    @pytest.mark.asyncio
    async def test_pagination_info(self, unit_env):
        """Seven answers at three per page give three pages."""
        use_case = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        for i in range(7):
            await answer_repo.save(make_answer(question.id, age_minutes=i))

        second = await use_case.execute(
            ListAnswersRequest(question_id=question.id, page=2)
        )
        last = await use_case.execute(
            ListAnswersRequest(question_id=question.id, page=3)
        )

        assert len(second.answers) == 3
        assert second.pagination.current_page == 2
        assert second.pagination.total_pages == 3
        assert second.pagination.total_answers == 7
        assert second.pagination.remaining_answers == 1
        assert second.pagination.has_more is True
        assert len(last.answers) == 1
        assert last.pagination.has_more is False

    @pytest.mark.asyncio
    async def test_includes_callers_votes(self, unit_env, user_id):
        """Each answer on the page carries the caller's own vote."""
        use_case = await unit_env.get(ListAnswersUseCase)
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        liked = await answer_repo.save(make_answer(question.id, age_minutes=1))
        disliked = await answer_repo.save(make_answer(question.id, age_minutes=2))
        await vote_service.cast_vote(user_id, VotableType.ANSWER, liked.id, 1)
        await vote_service.cast_vote(user_id, VotableType.ANSWER, disliked.id, -1)

        response = await use_case.execute(
            ListAnswersRequest(question_id=question.id, user_id=str(user_id))
        )
        anonymous = await use_case.execute(ListAnswersRequest(question_id=question.id))

        assert [(a.total_votes, a.user_vote) for a in response.answers] == [
            (1, 1),
            (-1, -1),
        ]
        assert all(a.user_vote is None for a in anonymous.answers)

    @pytest.mark.asyncio
    async def test_question_without_answers(self, unit_env):
        """An unanswered question yields an empty first page."""
        use_case = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        response = await use_case.execute(ListAnswersRequest(question_id=question.id))

        assert response.answers == []
        assert response.pagination.total_pages == 0
        assert response.pagination.has_more is False

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Listing answers of a missing question should raise NotFoundError."""
        use_case = await unit_env.get(ListAnswersUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListAnswersRequest(question_id=uuid4()))
