"""In-memory quote repository for testing."""

from datetime import datetime
from typing import Optional

from quotevote.domain.model.quote import Quote
from quotevote.domain.repository.quote import QuoteRepository
from quotevote.domain.value import QuoteFilter, QuoteId, QuoteQuery


class InMemoryQuoteRepository(QuoteRepository):
    """In-memory implementation of QuoteRepository for testing."""

    def __init__(self) -> None:
        self._quotes: dict[QuoteId, Quote] = {}

    def _matching(self, query: QuoteQuery) -> list[Quote]:
        quotes = list(self._quotes.values())

        if query.search:
            needle = query.search.lower()
            quotes = [q for q in quotes if needle in q.text.lower()]

        if query.filter is QuoteFilter.VOTED:
            quotes = [q for q in quotes if q.upvotes > 0]
        elif query.filter is QuoteFilter.NOT_VOTED:
            quotes = [q for q in quotes if q.downvotes > 0]

        return quotes

    async def find_by_id(
        self,
        quote_id: QuoteId,
        for_update: bool = False,
        lock_timeout: Optional[float] = None,
    ) -> Optional[Quote]:
        """Find a quote by ID (row locks don't apply in memory)."""
        return self._quotes.get(quote_id)

    async def find_all(self, query: QuoteQuery) -> list[Quote]:
        """Find one page of quotes matching a listing query."""
        quotes = self._matching(query)

        attribute = query.sort_by.attribute
        quotes.sort(
            key=lambda q: (getattr(q, attribute), q.id), reverse=query.descending
        )

        return quotes[query.offset : query.offset + query.limit]

    async def count(self, query: QuoteQuery) -> int:
        """Count quotes matching a listing query."""
        return len(self._matching(query))

    async def find_all_ids(self) -> list[QuoteId]:
        """List the IDs of every stored quote."""
        return list(self._quotes.keys())

    async def save(self, quote: Quote) -> Quote:
        """Save a new quote."""
        self._quotes[quote.id] = quote
        return quote

    async def update_content(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Quote]:
        """Update text and/or author, leaving counters untouched."""
        quote = self._quotes.get(quote_id)
        if quote is None:
            return None

        changes: dict[str, object] = {"updated_at": datetime.now()}
        if text is not None:
            changes["text"] = text
        if author is not None:
            changes["author"] = author

        updated = quote.model_copy(update=changes)
        self._quotes[quote_id] = updated
        return updated

    async def delete(self, quote_id: QuoteId) -> bool:
        """Delete a quote."""
        return self._quotes.pop(quote_id, None) is not None

    async def adjust_counters(
        self, quote_id: QuoteId, upvotes_delta: int = 0, downvotes_delta: int = 0
    ) -> Optional[Quote]:
        """Add deltas to the vote counters, each floored at 0."""
        quote = self._quotes.get(quote_id)
        if quote is None:
            return None

        updated = quote.model_copy(
            update={
                "upvotes": max(0, quote.upvotes + upvotes_delta),
                "downvotes": max(0, quote.downvotes + downvotes_delta),
                "updated_at": datetime.now(),
            }
        )
        self._quotes[quote_id] = updated
        return updated

    async def set_counters(
        self, quote_id: QuoteId, upvotes: int, downvotes: int
    ) -> Optional[Quote]:
        """Overwrite both vote counters."""
        quote = self._quotes.get(quote_id)
        if quote is None:
            return None

        updated = quote.model_copy(
            update={
                "upvotes": upvotes,
                "downvotes": downvotes,
                "updated_at": datetime.now(),
            }
        )
        self._quotes[quote_id] = updated
        return updated
