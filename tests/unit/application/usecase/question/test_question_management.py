"""Unit tests for editing and deleting questions."""

from uuid import uuid4

import pytest

from pharmqa.application.usecase.question import (
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    VoteRepository,
)
from pharmqa.domain.service import CommentService, VoteService
from pharmqa.domain.value import UserId, VotableType
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateQuestionUseCase:
    """Tests for UpdateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_author_edit_keeps_votes(self, unit_env, user_id):
        """Editing replaces the text and leaves the vote total alone."""
        use_case = await unit_env.get(UpdateQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        vote_service = await unit_env.get(VoteService)
        question = await question_repo.save(make_question(author_id=user_id))
        await vote_service.cast_vote(user_id, VotableType.QUESTION, question.id, 1)

        response = await use_case.execute(
            UpdateQuestionRequest(
                question_id=question.id,
                user_id=user_id,
                title="  Beta blockers and hypoglycaemia  ",
            )
        )

        assert response.title == "Beta blockers and hypoglycaemia"
        assert response.description == question.description
        assert response.total_votes == 1
        assert response.user_vote == 1

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env, user_id):
        use_case = await unit_env.get(UpdateQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateQuestionRequest(
                    question_id=question.id, user_id=user_id, title="Hijacked"
                )
            )

        assert (await question_repo.find_by_id(question.id)).title == question.title

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env, user_id):
        use_case = await unit_env.get(UpdateQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateQuestionRequest(question_id=uuid4(), user_id=user_id, title="x")
            )

    def test_blank_title_is_rejected(self, user_id):
        with pytest.raises(ValueError):
            UpdateQuestionRequest(question_id=uuid4(), user_id=user_id, title="   ")


class TestDeleteQuestionUseCase:
    """Tests for DeleteQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_whole_thread(self, unit_env, user_id):
        """Comments, answer votes, answers, question votes and the question go."""
        use_case = await unit_env.get(DeleteQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        voter = UserId(uuid4())

        question = await question_repo.save(make_question(author_id=user_id))
        answers = [await answer_repo.save(make_answer(question.id)) for _ in range(2)]
        for answer in answers:
            await comment_service.create_comment(answer.id, voter, "Agreed.")
            await vote_service.cast_vote(voter, VotableType.ANSWER, answer.id, 1)
        await vote_service.cast_vote(voter, VotableType.QUESTION, question.id, -1)

        response = await use_case.execute(
            DeleteQuestionRequest(question_id=question.id, user_id=user_id)
        )

        assert response.deleted_answers == 2
        assert response.deleted_comments == 2
        assert await question_repo.find_by_id(question.id) is None
        assert await vote_repo.find_by_user_and_votable(
            voter, VotableType.QUESTION, question.id
        ) is None
        for answer in answers:
            assert await answer_repo.find_by_id(answer.id) is None
            assert await comment_repo.find_by_answer(answer.id) == []
            assert await vote_repo.find_by_user_and_votable(
                voter, VotableType.ANSWER, answer.id
            ) is None

    @pytest.mark.asyncio
    async def test_other_threads_keep_their_votes(self, unit_env, user_id):
        """Deleting one question leaves another question's sum and votes intact."""
        use_case = await unit_env.get(DeleteQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        vote_service = await unit_env.get(VoteService)
        voter = UserId(uuid4())
        doomed = await question_repo.save(make_question(author_id=user_id))
        kept = await question_repo.save(make_question())
        for question in (doomed, kept):
            await vote_service.cast_vote(voter, VotableType.QUESTION, question.id, 1)

        await use_case.execute(
            DeleteQuestionRequest(question_id=doomed.id, user_id=user_id)
        )

        vote = await vote_repo.find_by_user_and_votable(
            voter, VotableType.QUESTION, kept.id
        )
        assert vote is not None
        assert (await question_repo.find_by_id(kept.id)).vote_sum == vote.value

    @pytest.mark.asyncio
    async def test_non_author_delete_changes_nothing(self, unit_env, user_id):
        use_case = await unit_env.get(DeleteQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteQuestionRequest(question_id=question.id, user_id=user_id)
            )

        assert await question_repo.find_by_id(question.id) is not None
        assert await answer_repo.find_by_id(answer.id) is not None

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env, user_id):
        use_case = await unit_env.get(DeleteQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteQuestionRequest(question_id=uuid4(), user_id=user_id)
            )
