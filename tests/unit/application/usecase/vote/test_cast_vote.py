"""Unit tests for the vote use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from pharmqa.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateUseCase,
)
from pharmqa.domain.error import NotFoundError
from pharmqa.domain.repository import QuestionRepository
from pharmqa.domain.value import VotableType, VoteValue
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteRequest:
    """Tests for request validation."""

    def test_value_is_parsed_as_vote_value(self):
        """Raw ints in range become VoteValue members."""
        request = CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=uuid4(),
            user_id=str(uuid4()),
            value=-1,
        )

        assert request.value is VoteValue.DOWN

    def test_out_of_range_value_is_rejected(self):
        """Values outside the enum fail validation."""
        with pytest.raises(ValidationError):
            CastVoteRequest(
                votable_type=VotableType.ANSWER,
                votable_id=uuid4(),
                user_id=str(uuid4()),
                value=2,
            )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_returns_total_and_user_vote(self, unit_env, user_id):
        """Casting should report the new total and the caller's vote."""
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(vote_sum=5))

        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=question.id,
                user_id=str(user_id),
                value=VoteValue.UP,
            )
        )

        assert response.total_votes == 6
        assert response.user_vote == 1
        assert response.model_dump(by_alias=True) == {
            "totalVotes": 6,
            "userVote": 1,
        }

    @pytest.mark.asyncio
    async def test_retract_reports_null_user_vote(self, unit_env, user_id):
        """After a retract the caller's vote is None."""
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        def request(value: int) -> CastVoteRequest:
            return CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=question.id,
                user_id=str(user_id),
                value=value,
            )

        await use_case.execute(request(1))
        response = await use_case.execute(request(0))

        assert response.total_votes == 0
        assert response.user_vote is None


class TestGetVoteStateUseCase:
    """Tests for GetVoteStateUseCase."""

    @pytest.mark.asyncio
    async def test_reports_state_for_voter_and_anonymous(self, unit_env, user_id):
        """Voters see their vote; anonymous readers see only the total."""
        cast_use_case = await unit_env.get(CastVoteUseCase)
        state_use_case = await unit_env.get(GetVoteStateUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(vote_sum=2))
        await cast_use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=question.id,
                user_id=str(user_id),
                value=-1,
            )
        )

        mine = await state_use_case.execute(
            GetVoteStateRequest(
                votable_type=VotableType.QUESTION,
                votable_id=question.id,
                user_id=str(user_id),
            )
        )
        anonymous = await state_use_case.execute(
            GetVoteStateRequest(
                votable_type=VotableType.QUESTION, votable_id=question.id
            )
        )

        assert (mine.total_votes, mine.user_vote) == (1, -1)
        assert (anonymous.total_votes, anonymous.user_vote) == (1, None)

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self, unit_env):
        """Reading a missing answer should raise NotFoundError."""
        use_case = await unit_env.get(GetVoteStateUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetVoteStateRequest(votable_type=VotableType.ANSWER, votable_id=uuid4())
            )
