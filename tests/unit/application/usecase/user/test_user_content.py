"""Unit tests for listing the current user's own content."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from pharmqa.application.usecase.user import (
    ListMyAnswersRequest,
    ListMyAnswersUseCase,
    ListMyCommentsRequest,
    ListMyCommentsUseCase,
    ListMyQuestionsRequest,
    ListMyQuestionsUseCase,
)
from pharmqa.domain.repository import AnswerRepository, QuestionRepository
from pharmqa.domain.service import CommentService
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListMyQuestions:
    """Tests for ListMyQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_only_own_questions_newest_first(self, unit_env, user_id):
        use_case = await unit_env.get(ListMyQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        earlier = datetime.now() - timedelta(days=1)
        older = await question_repo.save(
            make_question(author_id=user_id, created_at=earlier, updated_at=earlier)
        )
        newer = await question_repo.save(make_question(author_id=user_id, vote_sum=2))
        await question_repo.save(make_question())
        await answer_repo.save(make_answer(older.id))

        response = await use_case.execute(ListMyQuestionsRequest(user_id=user_id))

        assert [q.id for q in response.questions] == [str(newer.id), str(older.id)]
        assert response.questions[0].total_votes == 2
        assert response.questions[1].total_answers == 1
        assert response.pagination.total_items == 2

    @pytest.mark.asyncio
    async def test_pages_hold_ten(self, unit_env, user_id):
        use_case = await unit_env.get(ListMyQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        for _ in range(11):
            await question_repo.save(make_question(author_id=user_id))

        first = await use_case.execute(ListMyQuestionsRequest(user_id=user_id))
        second = await use_case.execute(
            ListMyQuestionsRequest(user_id=user_id, page=2)
        )

        assert len(first.questions) == 10
        assert first.pagination.has_more is True
        assert len(second.questions) == 1


class TestListMyAnswers:
    """Tests for ListMyAnswersUseCase."""

    @pytest.mark.asyncio
    async def test_answers_name_their_question(self, unit_env, user_id):
        use_case = await unit_env.get(ListMyAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(title="Statins at night?"))
        mine = await answer_repo.save(
            make_answer(question.id, author_id=user_id, vote_sum=3, comment_count=1)
        )
        await answer_repo.save(make_answer(question.id))

        response = await use_case.execute(ListMyAnswersRequest(user_id=user_id))

        assert len(response.answers) == 1
        item = response.answers[0]
        assert item.id == str(mine.id)
        assert item.total_votes == 3
        assert item.total_comments == 1
        assert item.question.id == str(question.id)
        assert item.question.title == "Statins at night?"


class TestListMyComments:
    """Tests for ListMyCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_comments_name_their_answer(self, unit_env, user_id):
        use_case = await unit_env.get(ListMyCommentsUseCase)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_service = await unit_env.get(CommentService)
        answer = await answer_repo.save(make_answer(uuid4()))
        await comment_service.create_comment(answer.id, user_id, "Which guideline?")
        await comment_service.create_comment(answer.id, uuid4(), "Not mine")

        response = await use_case.execute(ListMyCommentsRequest(user_id=user_id))

        assert [c.body for c in response.comments] == ["Which guideline?"]
        assert response.comments[0].answer.id == str(answer.id)
        assert response.comments[0].answer.question_id == str(answer.question_id)

    @pytest.mark.asyncio
    async def test_no_comments(self, unit_env, user_id):
        use_case = await unit_env.get(ListMyCommentsUseCase)

        response = await use_case.execute(ListMyCommentsRequest(user_id=user_id))

        assert response.comments == []
        assert response.pagination.total_items == 0
