"""Comment domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.model.comment import Comment
from pharmqa.domain.repository import CommentRepository
from pharmqa.domain.value import AnswerId, CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Comment counts on answers are maintained by CounterService; callers pair
    each create/delete here with the matching counter delta.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, answer_id: AnswerId, author_id: UserId, body: str
    ) -> Comment:
        """Create a comment on an answer.

        Args:
            answer_id: Answer ID
            author_id: Author user ID
            body: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            answer_id=str(answer_id),
            author_id=str(author_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                answer_id=answer_id,
                author_id=author_id,
                body=body,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), answer_id=str(answer_id)
            )
            return saved

    async def get_comments_for_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Get all comments on an answer, newest first.

        Args:
            answer_id: Answer ID

        Returns:
            List of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_answer", answer_id=str(answer_id)
        ):
            comments = await self.comment_repository.find_by_answer(answer_id)
            logfire.info(
                "Comments retrieved for answer",
                answer_id=str(answer_id),
                count=len(comments),
            )
            return comments

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Delete a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: ID of the user requesting deletion

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment deletion attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                # Removed by a concurrent request, which owns the counter update
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id))
            return comment

    async def list_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> tuple[list[Comment], int]:
        """List one page of a user's comments, newest first."""
        with logfire.span("comment_service.list_by_author", author_id=str(author_id)):
            comments = await self.comment_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_by_author(author_id)
            return comments, total

    async def delete_comments_for_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment on answers that are being deleted.

        The answers' comment counts are not adjusted since the answers go too.

        Returns:
            Number of comments deleted
        """
        with logfire.span(
            "comment_service.delete_comments_for_answers", count=len(answer_ids)
        ):
            deleted = await self.comment_repository.delete_by_answers(answer_ids)
            logfire.info("Comments deleted", deleted=deleted)
            return deleted
