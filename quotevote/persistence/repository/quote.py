"""PostgreSQL implementation of Quote repository."""

from datetime import datetime
from typing import Any, List, Optional

import logfire
from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quotevote.domain.model import Quote
from quotevote.domain.repository import QuoteRepository
from quotevote.domain.value import QuoteFilter, QuoteId, QuoteQuery
from quotevote.persistence.mappers import quote_to_dict, row_to_quote
from quotevote.persistence.tables import quotes_table


def _apply_criteria(stmt: Select[Any], query: QuoteQuery) -> Select[Any]:
    """Apply the search and vote filters of a listing query."""
    if query.search:
        stmt = stmt.where(quotes_table.c.text.icontains(query.search, autoescape=True))

    if query.filter is QuoteFilter.VOTED:
        stmt = stmt.where(quotes_table.c.upvotes > 0)
    elif query.filter is QuoteFilter.NOT_VOTED:
        stmt = stmt.where(quotes_table.c.downvotes > 0)

    return stmt


class PostgresQuoteRepository(QuoteRepository):
    """PostgreSQL implementation of QuoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self,
        quote_id: QuoteId,
        for_update: bool = False,
        lock_timeout: Optional[float] = None,
    ) -> Optional[Quote]:
        """Find a quote by ID, optionally taking a row lock.

        A lock wait longer than ``lock_timeout`` fails with PostgreSQL's
        lock_not_available error (SQLSTATE 55P03).
        """
        with logfire.span(
            "quote_repository.find_by_id", quote_id=str(quote_id), for_update=for_update
        ):
            stmt = select(quotes_table).where(quotes_table.c.id == quote_id)
            if for_update:
                if lock_timeout is not None:
                    # Transaction-local like SET LOCAL; 0ms would disable the limit
                    millis = max(int(lock_timeout * 1000), 1)
                    await self.session.execute(
                        select(func.set_config("lock_timeout", f"{millis}ms", True))
                    )
                stmt = stmt.with_for_update()
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_quote(row._asdict()) if row else None

    async def find_all(self, query: QuoteQuery) -> List[Quote]:
        """Find one page of quotes matching a listing query."""
        with logfire.span(
            "quote_repository.find_all",
            sort_by=query.sort_by.value,
            order=query.order.value,
            limit=query.limit,
            offset=query.offset,
        ):
            stmt = _apply_criteria(select(quotes_table), query)

            sort_column = quotes_table.c[query.sort_by.attribute]
            if query.descending:
                stmt = stmt.order_by(sort_column.desc(), quotes_table.c.id.desc())
            else:
                stmt = stmt.order_by(sort_column.asc(), quotes_table.c.id.asc())

            stmt = stmt.limit(query.limit).offset(query.offset)

            result = await self.session.execute(stmt)
            return [row_to_quote(row._asdict()) for row in result.fetchall()]

    async def count(self, query: QuoteQuery) -> int:
        """Count quotes matching a listing query."""
        stmt = _apply_criteria(select(func.count()).select_from(quotes_table), query)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_all_ids(self) -> List[QuoteId]:
        """List the IDs of every stored quote."""
        result = await self.session.execute(
            select(quotes_table.c.id).order_by(quotes_table.c.created_at)
        )
        return [QuoteId(row.id) for row in result.fetchall()]

    async def save(self, quote: Quote) -> Quote:
        """Save a new quote."""
        with logfire.span("quote_repository.save", quote_id=str(quote.id)):
            stmt = insert(quotes_table).values(**quote_to_dict(quote))
            await self.session.execute(stmt)
            await self.session.flush()
            return quote

    async def update_content(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Quote]:
        """Update text and/or author, leaving counters untouched."""
        with logfire.span("quote_repository.update_content", quote_id=str(quote_id)):
            values: dict[str, Any] = {"updated_at": datetime.now()}
            if text is not None:
                values["text"] = text
            if author is not None:
                values["author"] = author

            stmt = (
                update(quotes_table)
                .where(quotes_table.c.id == quote_id)
                .values(**values)
                .returning(*quotes_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_quote(row._asdict()) if row else None

    async def delete(self, quote_id: QuoteId) -> bool:
        """Delete a quote."""
        with logfire.span("quote_repository.delete", quote_id=str(quote_id)):
            stmt = delete(quotes_table).where(quotes_table.c.id == quote_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_counters(
        self, quote_id: QuoteId, upvotes_delta: int = 0, downvotes_delta: int = 0
    ) -> Optional[Quote]:
        """Atomically add deltas to the vote counters, each floored at 0."""
        with logfire.span(
            "quote_repository.adjust_counters",
            quote_id=str(quote_id),
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            stmt = (
                update(quotes_table)
                .where(quotes_table.c.id == quote_id)
                .values(
                    upvotes=func.greatest(quotes_table.c.upvotes + upvotes_delta, 0),
                    downvotes=func.greatest(
                        quotes_table.c.downvotes + downvotes_delta, 0
                    ),
                    updated_at=datetime.now(),
                )
                .returning(*quotes_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_quote(row._asdict()) if row else None

    async def set_counters(
        self, quote_id: QuoteId, upvotes: int, downvotes: int
    ) -> Optional[Quote]:
        """Overwrite both vote counters."""
        stmt = (
            update(quotes_table)
            .where(quotes_table.c.id == quote_id)
            .values(upvotes=upvotes, downvotes=downvotes, updated_at=datetime.now())
            .returning(*quotes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_quote(row._asdict()) if row else None
