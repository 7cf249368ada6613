"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmqa.domain.model import Vote
from pharmqa.domain.repository import VoteRepository
from pharmqa.domain.value import UserId, VotableType, VoteId
from pharmqa.persistence.mappers import row_to_vote, vote_to_dict
from pharmqa.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Create a vote.

        The insert runs in a SAVEPOINT so a unique_vote violation rolls back
        only this statement and the request transaction stays usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_value(
        self, vote_id: VoteId, expected_value: int, value: int
    ) -> Optional[Vote]:
        """Change a vote's value if it still holds expected_value.

        Under READ COMMITTED a concurrent writer's change is re-checked
        against the full WHERE clause once its row lock is released, so a
        stale expected_value matches no row.
        """
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.id == vote_id,
                    votes_table.c.value == expected_value,
                )
            )
            .values(value=value, updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId, expected_value: int) -> bool:
        """Delete a vote if it still holds expected_value."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.id == vote_id,
                votes_table.c.value == expected_value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items."""
        if not votable_ids:
            return 0

        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def sum_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Sum the values of all votes on an item."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
