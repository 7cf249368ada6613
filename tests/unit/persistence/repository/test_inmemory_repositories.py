"""Tests for the in-memory repositories backing unit and e2e tests."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from pharmqa.domain.model import Comment, Vote
from pharmqa.domain.value import CommentId, QuestionId, UserId, VotableType, VoteId
from pharmqa.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_answer


def make_vote(user_id: UserId, votable_id, value: int = 1) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        votable_type=VotableType.QUESTION,
        votable_id=votable_id,
        value=value,
    )


class TestInMemoryAnswerRepository:
    """Ordering and counters of the answer repository."""

    @pytest.mark.asyncio
    async def test_answers_ordered_by_votes_then_newest(self):
        repo = InMemoryAnswerRepository()
        question_id = QuestionId(uuid4())
        old_top = make_answer(question_id, vote_sum=5, age_minutes=30)
        new_top = make_answer(question_id, vote_sum=5, age_minutes=1)
        low = make_answer(question_id, vote_sum=-2)
        other = make_answer(QuestionId(uuid4()), vote_sum=50)
        for answer in (low, old_top, other, new_top):
            await repo.save(answer)

        page = await repo.find_by_question(question_id, limit=2, offset=0)
        rest = await repo.find_by_question(question_id, limit=2, offset=2)

        assert [a.id for a in page] == [new_top.id, old_top.id]
        assert [a.id for a in rest] == [low.id]
        assert await repo.count_by_question(question_id) == 3

    @pytest.mark.asyncio
    async def test_increments_compose_and_missing_returns_none(self):
        repo = InMemoryAnswerRepository()
        answer = await repo.save(make_answer(QuestionId(uuid4())))

        await repo.increment_vote_sum(answer.id, 1)
        total = await repo.increment_vote_sum(answer.id, -2)

        assert total == -1
        assert await repo.increment_vote_sum(uuid4(), 1) is None

    @pytest.mark.asyncio
    async def test_comment_count_never_negative(self):
        repo = InMemoryAnswerRepository()
        answer = await repo.save(make_answer(QuestionId(uuid4()), comment_count=0))

        assert await repo.increment_comment_count(answer.id, -1) == 0

    @pytest.mark.asyncio
    async def test_count_by_questions_and_delete_by_question(self):
        repo = InMemoryAnswerRepository()
        busy, quiet, empty = (QuestionId(uuid4()) for _ in range(3))
        for question_id in (busy, busy, quiet):
            await repo.save(make_answer(question_id))

        counts = await repo.count_by_questions([busy, quiet, empty])
        deleted = await repo.delete_by_question(busy)

        assert counts == {busy: 2, quiet: 1}
        assert deleted == 2
        assert await repo.count_by_question(busy) == 0
        assert await repo.count_by_question(quiet) == 1


class TestInMemoryVoteRepository:
    """Uniqueness and aggregation of the vote repository."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self, user_id):
        repo = InMemoryVoteRepository()
        question_id = uuid4()
        await repo.save(make_vote(user_id, question_id))

        with pytest.raises(IntegrityError):
            await repo.save(make_vote(user_id, question_id, value=-1))

    @pytest.mark.asyncio
    async def test_update_requires_expected_value(self, user_id):
        repo = InMemoryVoteRepository()
        vote = await repo.save(make_vote(user_id, uuid4(), value=1))

        stale = await repo.update_value(vote.id, -1, 1)
        updated = await repo.update_value(vote.id, 1, -1)

        assert stale is None
        assert updated.value == -1
        assert await repo.update_value(VoteId(uuid4()), 1, -1) is None

    @pytest.mark.asyncio
    async def test_delete_requires_expected_value(self, user_id):
        repo = InMemoryVoteRepository()
        vote = await repo.save(make_vote(user_id, uuid4(), value=-1))

        assert await repo.delete(vote.id, 1) is False
        assert await repo.delete(vote.id, -1) is True
        assert await repo.delete(vote.id, -1) is False

    @pytest.mark.asyncio
    async def test_sum_by_votable_counts_only_that_item(self):
        repo = InMemoryVoteRepository()
        question_id = uuid4()
        for value in (1, 1, -1):
            await repo.save(make_vote(UserId(uuid4()), question_id, value))
        await repo.save(make_vote(UserId(uuid4()), uuid4(), 1))

        assert await repo.sum_by_votable(VotableType.QUESTION, question_id) == 1

    @pytest.mark.asyncio
    async def test_delete_by_votables_leaves_other_items(self, user_id):
        repo = InMemoryVoteRepository()
        doomed, kept = uuid4(), uuid4()
        await repo.save(make_vote(user_id, doomed))
        await repo.save(make_vote(UserId(uuid4()), doomed, value=-1))
        await repo.save(make_vote(user_id, kept))

        deleted = await repo.delete_by_votables(VotableType.QUESTION, [doomed])

        assert deleted == 2
        assert await repo.sum_by_votable(VotableType.QUESTION, doomed) == 0
        assert await repo.sum_by_votable(VotableType.QUESTION, kept) == 1
        assert await repo.delete_by_votables(VotableType.ANSWER, [kept]) == 0


class TestInMemoryCommentRepository:
    """Bulk deletion of the comment repository."""

    @pytest.mark.asyncio
    async def test_delete_by_answers(self, user_id):
        repo = InMemoryCommentRepository()
        doomed, kept = uuid4(), uuid4()
        for answer_id in (doomed, doomed, kept):
            await repo.save(
                Comment(
                    id=CommentId(uuid4()),
                    answer_id=answer_id,
                    author_id=user_id,
                    body="See the BNF entry.",
                )
            )

        assert await repo.delete_by_answers([doomed]) == 2
        assert await repo.find_by_answer(doomed) == []
        assert len(await repo.find_by_answer(kept)) == 1
        assert await repo.delete_by_answers([]) == 0
