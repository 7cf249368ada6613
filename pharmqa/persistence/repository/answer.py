"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmqa.domain.model import Answer
from pharmqa.domain.repository import AnswerRepository
from pharmqa.domain.value import AnswerId, QuestionId, UserId
from pharmqa.persistence.mappers import answer_to_dict, row_to_answer
from pharmqa.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(
        self,
        question_id: QuestionId,
        limit: int = 3,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question, best voted first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(desc(answers_table.c.vote_sum), desc(answers_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Create an answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def find_vote_sum(self, votable_id: UUID) -> Optional[int]:
        """Read the current vote sum."""
        stmt = select(answers_table.c.vote_sum).where(answers_table.c.id == votable_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_vote_sum(self, votable_id: UUID, delta: int) -> Optional[int]:
        """Atomically add delta to the vote sum (single UPDATE ... RETURNING)."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == votable_id)
            .values(
                vote_sum=answers_table.c.vote_sum + delta,
                updated_at=datetime.now(),
            )
            .returning(answers_table.c.vote_sum)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def set_vote_sum(self, votable_id: UUID, vote_sum: int) -> Optional[int]:
        """Overwrite the vote sum (reconciliation only)."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == votable_id)
            .values(vote_sum=vote_sum)
            .returning(answers_table.c.vote_sum)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def list_ids(self) -> List[UUID]:
        """List the IDs of all answers."""
        result = await self.session.execute(select(answers_table.c.id))
        return list(result.scalars().all())

    async def increment_comment_count(
        self, answer_id: AnswerId, delta: int
    ) -> Optional[int]:
        """Atomically add delta to the comment count (never below 0)."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(
                comment_count=func.greatest(answers_table.c.comment_count + delta, 0)
            )
            .returning(answers_table.c.comment_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> List[Answer]:
        """Find several answers at once."""
        if not answer_ids:
            return []
        stmt = select(answers_table).where(answers_table.c.id.in_(answer_ids))
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[UUID, int]:
        """Count answers for several questions in one grouped query."""
        if not question_ids:
            return {}
        stmt = (
            select(answers_table.c.question_id, func.count())
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {question_id: count for question_id, count in result.fetchall()}

    async def list_ids_by_question(self, question_id: QuestionId) -> List[AnswerId]:
        """List the IDs of every answer to a question."""
        stmt = select(answers_table.c.id).where(
            answers_table.c.question_id == question_id
        )
        result = await self.session.execute(stmt)
        return [AnswerId(answer_id) for answer_id in result.scalars().all()]

    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> List[Answer]:
        """Find a user's answers, newest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.author_id == author_id)
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's answers."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_content(
        self, answer_id: AnswerId, description: str
    ) -> Optional[Answer]:
        """Replace an answer's description."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(description=description, updated_at=datetime.now())
            .returning(answers_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_answer(row._asdict()) if row else None

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer row."""
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        stmt = delete(answers_table).where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
