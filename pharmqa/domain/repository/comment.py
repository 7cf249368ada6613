"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pharmqa.domain.model.comment import Comment
from pharmqa.domain.value import AnswerId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> List[Comment]:
        """Find all comments on an answer, newest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> List[Comment]:
        """Find a user's comments, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        pass

    @abstractmethod
    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment on the given answers.

        Returns:
            Number of comments deleted
        """
        pass
