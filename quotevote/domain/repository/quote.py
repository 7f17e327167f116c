"""Quote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quotevote.domain.model.quote import Quote
from quotevote.domain.value import QuoteId, QuoteQuery


class QuoteRepository(ABC):
    """Repository for Quote aggregate.

    Defines the contract for quote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self,
        quote_id: QuoteId,
        for_update: bool = False,
        lock_timeout: Optional[float] = None,
    ) -> Optional[Quote]:
        """Find a quote by ID.

        Args:
            quote_id: The quote's unique identifier
            for_update: Row-lock the quote until the current transaction ends
            lock_timeout: Max seconds to wait for the row lock (None waits
                as long as the store does)

        Returns:
            The quote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, query: QuoteQuery) -> List[Quote]:
        """Find one page of quotes matching a listing query.

        Args:
            query: Search, filter, sort and pagination parameters

        Returns:
            Quotes on the requested page
        """
        pass

    @abstractmethod
    async def count(self, query: QuoteQuery) -> int:
        """Count quotes matching a listing query, ignoring pagination.

        Args:
            query: Search and filter parameters (sort/page are ignored)

        Returns:
            Total number of matching quotes
        """
        pass

    @abstractmethod
    async def find_all_ids(self) -> List[QuoteId]:
        """List the IDs of every stored quote."""
        pass

    @abstractmethod
    async def save(self, quote: Quote) -> Quote:
        """Save a new quote.

        Args:
            quote: The quote to save

        Returns:
            The saved quote
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        quote_id: QuoteId,
        text: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Quote]:
        """Update text and/or author of a quote.

        Leaves the vote counters untouched so edits never race with votes.

        Args:
            quote_id: ID of the quote to update
            text: New text (None keeps the current text)
            author: New author (None keeps the current author)

        Returns:
            Updated quote, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, quote_id: QuoteId) -> bool:
        """Delete a quote.

        Args:
            quote_id: The quote ID to delete

        Returns:
            True if a quote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self, quote_id: QuoteId, upvotes_delta: int = 0, downvotes_delta: int = 0
    ) -> Optional[Quote]:
        """Atomically add deltas to the vote counters.

        Each counter is floored at 0. Uses a single SQL-level update to
        avoid lost updates.

        Args:
            quote_id: The quote ID
            upvotes_delta: Amount added to upvotes
            downvotes_delta: Amount added to downvotes

        Returns:
            The updated quote, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_counters(
        self, quote_id: QuoteId, upvotes: int, downvotes: int
    ) -> Optional[Quote]:
        """Overwrite both vote counters.

        Used by counter reconciliation only.

        Args:
            quote_id: The quote ID
            upvotes: New upvote count
            downvotes: New downvote count

        Returns:
            The updated quote, or None if it doesn't exist
        """
        pass
