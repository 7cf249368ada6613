"""PostgreSQL implementation of Question repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmqa.domain.model import Question
from pharmqa.domain.repository import QuestionRepository
from pharmqa.domain.value import QuestionId, UserId
from pharmqa.persistence.mappers import question_to_dict, row_to_question
from pharmqa.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def save(self, question: Question) -> Question:
        """Create a question."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def find_vote_sum(self, votable_id: UUID) -> Optional[int]:
        """Read the current vote sum."""
        stmt = select(questions_table.c.vote_sum).where(
            questions_table.c.id == votable_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_vote_sum(self, votable_id: UUID, delta: int) -> Optional[int]:
        """Atomically add delta to the vote sum (single UPDATE ... RETURNING)."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == votable_id)
            .values(
                vote_sum=questions_table.c.vote_sum + delta,
                updated_at=datetime.now(),
            )
            .returning(questions_table.c.vote_sum)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def set_vote_sum(self, votable_id: UUID, vote_sum: int) -> Optional[int]:
        """Overwrite the vote sum (reconciliation only)."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == votable_id)
            .values(vote_sum=vote_sum)
            .returning(questions_table.c.vote_sum)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def list_ids(self) -> List[UUID]:
        """List the IDs of all questions."""
        result = await self.session.execute(select(questions_table.c.id))
        return list(result.scalars().all())

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> List[Question]:
        """Find several questions at once."""
        if not question_ids:
            return []
        stmt = select(questions_table).where(questions_table.c.id.in_(question_ids))
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def find_recent(self, limit: int, offset: int = 0) -> List[Question]:
        """Find questions, newest first."""
        stmt = (
            select(questions_table)
            .order_by(desc(questions_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all questions."""
        result = await self.session.execute(
            select(func.count()).select_from(questions_table)
        )
        return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int, offset: int = 0
    ) -> List[Question]:
        """Find a user's questions, newest first."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.author_id == author_id)
            .order_by(desc(questions_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's questions."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_content(
        self, question_id: QuestionId, title: str, description: str
    ) -> Optional[Question]:
        """Replace a question's title and description."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(title=title, description=description, updated_at=datetime.now())
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_question(row._asdict()) if row else None

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question row."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
