"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from pharmqa.domain.model.comment import Comment
from pharmqa.domain.repository.comment import CommentRepository
from pharmqa.domain.value import AnswerId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Find all comments on an answer, newest first."""
        comments = [c for c in self._comments.values() if c.answer_id == answer_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> list[Comment]:
        """Find a user's comments, newest first."""
        comments = [c for c in self._comments.values() if c.author_id == author_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        return sum(1 for c in self._comments.values() if c.author_id == author_id)

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment on the given answers."""
        targets = set(answer_ids)
        doomed = [c.id for c in self._comments.values() if c.answer_id in targets]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
