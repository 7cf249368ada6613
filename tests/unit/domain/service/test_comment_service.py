"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.model.comment import Comment
from pharmqa.domain.repository import CommentRepository
from pharmqa.domain.service import CommentService
from pharmqa.domain.value import AnswerId, CommentId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_persists(self, unit_env, user_id):
        """Created comment should be retrievable."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        answer_id = AnswerId(uuid4())

        comment = await comment_service.create_comment(
            answer_id, user_id, "Check the renal dose adjustment."
        )

        saved = await comment_repo.find_by_id(comment.id)
        assert saved == comment
        assert saved.author_id == user_id
        assert saved.answer_id == answer_id

    @pytest.mark.asyncio
    async def test_empty_body_is_rejected(self, unit_env, user_id):
        """Comment bodies must not be empty."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValueError):
            await comment_service.create_comment(AnswerId(uuid4()), user_id, "")


class TestGetCommentsForAnswer:
    """Tests for get_comments_for_answer method."""

    @pytest.mark.asyncio
    async def test_returns_newest_first(self, unit_env, user_id):
        """Comments should be ordered newest first."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        answer_id = AnswerId(uuid4())
        now = datetime.now()

        for minutes, body in [(30, "oldest"), (0, "newest"), (10, "middle")]:
            await comment_repo.save(
                Comment(
                    id=CommentId(uuid4()),
                    answer_id=answer_id,
                    author_id=user_id,
                    body=body,
                    created_at=now - timedelta(minutes=minutes),
                )
            )
        # Comment on another answer
        await comment_service.create_comment(AnswerId(uuid4()), user_id, "elsewhere")

        comments = await comment_service.get_comments_for_answer(answer_id)

        assert [c.body for c in comments] == ["newest", "middle", "oldest"]


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env, user_id):
        """The author should be able to delete their comment."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_service.create_comment(
            AnswerId(uuid4()), user_id, "Typo, ignore"
        )

        deleted = await comment_service.delete_comment(comment.id, user_id)

        assert deleted.id == comment.id
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env, user_id):
        """Non-authors get NotAuthorizedError and the comment survives."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_service.create_comment(
            AnswerId(uuid4()), user_id, "Mine"
        )

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, UserId(uuid4()))

        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env, user_id):
        """Deleting a missing comment should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()), user_id)
