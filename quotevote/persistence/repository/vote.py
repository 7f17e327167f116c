"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quotevote.domain.model import Vote
from quotevote.domain.repository import VoteRepository
from quotevote.domain.value import QuoteId, UserId, VoteId, VoteType
from quotevote.persistence.mappers import row_to_vote, vote_to_dict
from quotevote.persistence.tables import votes_table


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

    async def find_by_user_and_quote(
        self, user_id: UserId, quote_id: QuoteId
    ) -> Optional[Vote]:
        """Find a user's vote on a quote."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.quote_id == quote_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_quote(self, quote_id: QuoteId) -> List[Vote]:
        """Find all votes on a quote."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.quote_id == quote_id)
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_quote(self, quote_id: QuoteId, vote_type: VoteType) -> int:
        """Count votes of one type on a quote."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                votes_table.c.quote_id == quote_id,
                votes_table.c.vote_type == vote_type.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: If the user already voted on this quote
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        # Savepoint so a unique violation leaves the request transaction usable
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Flip a vote to a new type."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value, updated_at=datetime.now())
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete_by_quote(self, quote_id: QuoteId) -> int:
        """Delete every vote on a quote."""
        stmt = delete(votes_table).where(votes_table.c.quote_id == quote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
