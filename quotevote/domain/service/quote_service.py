"""Quote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import DBAPIError

from quotevote.config import VotingSettings
from quotevote.domain.error import (
    InvalidArgumentError,
    NotFoundError,
    VoteTimeoutError,
)
from quotevote.domain.model.quote import DEFAULT_AUTHOR, Quote, QuotePage
from quotevote.domain.repository import QuoteRepository, VoteRepository
from quotevote.domain.value import QuoteId, QuoteQuery

from .base import Service
from .lock import QuoteLockRegistry


# PostgreSQL lock_not_available, raised when lock_timeout expires
LOCK_NOT_AVAILABLE = "55P03"


def _is_lock_timeout(error: DBAPIError) -> bool:
    sqlstate = getattr(error.orig, "sqlstate", None) or getattr(
        error.orig, "pgcode", None
    )
    return sqlstate == LOCK_NOT_AVAILABLE


def _normalize_author(author: str | None) -> str:
    if author is None or not author.strip():
        return DEFAULT_AUTHOR
    return author


class QuoteService(Service):
    """Domain service for quote lifecycle and listing."""

    def __init__(
        self,
        quote_repository: QuoteRepository,
        vote_repository: VoteRepository,
        quote_locks: QuoteLockRegistry,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize quote service.

        Args:
            quote_repository: Quote repository
            vote_repository: Vote repository (for cascading deletes)
            quote_locks: Process-wide per-quote locks
            voting_settings: Lock timeout configuration
        """
        self.quote_repository = quote_repository
        self.vote_repository = vote_repository
        self.quote_locks = quote_locks
        self.voting_settings = voting_settings

    async def create_quote(self, text: str, author: str | None = None) -> Quote:
        """Create a quote with zeroed counters.

        Args:
            text: Quote text (must not be blank)
            author: Author name, "Unknown" when missing or blank

        Returns:
            Created quote

        Raises:
            InvalidArgumentError: If text is blank
        """
        with logfire.span("quote_service.create_quote", author=author):
            if not text or not text.strip():
                logfire.warn("Rejected quote with blank text")
                raise InvalidArgumentError("Quote text is required")

            now = datetime.now()
            quote = Quote(
                id=QuoteId(uuid4()),
                text=text,
                author=_normalize_author(author),
                upvotes=0,
                downvotes=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.quote_repository.save(quote)
            logfire.info("Quote created", quote_id=str(saved.id), author=saved.author)
            return saved

    async def get_quote(self, quote_id: QuoteId, for_update: bool = False) -> Quote:
        """Get a quote by ID.

        Args:
            quote_id: Quote ID
            for_update: Row-lock the quote for the rest of the transaction

        Returns:
            The quote

        Raises:
            NotFoundError: If the quote doesn't exist
            VoteTimeoutError: If the row lock wasn't granted within the
                vote lock timeout
        """
        timeout = self.voting_settings.lock_timeout_seconds
        with logfire.span("quote_service.get_quote", quote_id=str(quote_id)):
            try:
                quote = await self.quote_repository.find_by_id(
                    quote_id,
                    for_update=for_update,
                    lock_timeout=timeout if for_update else None,
                )
            except DBAPIError as e:
                if not _is_lock_timeout(e):
                    raise
                logfire.warn(
                    "Quote row lock wait timed out",
                    quote_id=str(quote_id),
                    timeout=timeout,
                )
                raise VoteTimeoutError(str(quote_id), timeout) from e
            if quote is None:
                logfire.warn("Quote not found", quote_id=str(quote_id))
                raise NotFoundError("Quote", str(quote_id))
            return quote

    async def update_quote(
        self,
        quote_id: QuoteId,
        text: str | None = None,
        author: str | None = None,
    ) -> Quote:
        """Update text and/or author of a quote.

        Args:
            quote_id: Quote ID
            text: New text; None leaves it unchanged, blank is rejected
            author: New author; None leaves it unchanged, blank becomes "Unknown"

        Returns:
            Updated quote

        Raises:
            InvalidArgumentError: If text is provided but blank
            NotFoundError: If the quote doesn't exist
        """
        with logfire.span(
            "quote_service.update_quote",
            quote_id=str(quote_id),
            updates_text=text is not None,
            updates_author=author is not None,
        ):
            if text is not None and not text.strip():
                raise InvalidArgumentError("Quote text cannot be empty")

            updated = await self.quote_repository.update_content(
                quote_id,
                text=text,
                author=_normalize_author(author) if author is not None else None,
            )
            if updated is None:
                logfire.warn("Quote not found for update", quote_id=str(quote_id))
                raise NotFoundError("Quote", str(quote_id))

            logfire.info("Quote updated", quote_id=str(quote_id))
            return updated

    async def delete_quote(self, quote_id: QuoteId) -> int:
        """Delete a quote and every vote on it.

        Runs under the quote's lock so no vote lands mid-delete.

        Args:
            quote_id: Quote ID

        Returns:
            Number of votes removed with the quote

        Raises:
            NotFoundError: If nothing was deleted
            VoteTimeoutError: If the quote lock couldn't be acquired
        """
        with logfire.span("quote_service.delete_quote", quote_id=str(quote_id)):
            async with self.quote_locks.hold(
                quote_id, timeout=self.voting_settings.lock_timeout_seconds
            ):
                # Counted first; the store may cascade votes with the quote
                removed_votes = len(await self.vote_repository.find_by_quote(quote_id))

                deleted = await self.quote_repository.delete(quote_id)
                if not deleted:
                    logfire.warn("Quote not found for delete", quote_id=str(quote_id))
                    raise NotFoundError("Quote", str(quote_id))

                await self.vote_repository.delete_by_quote(quote_id)

            logfire.info(
                "Quote deleted", quote_id=str(quote_id), removed_votes=removed_votes
            )
            return removed_votes

    async def list_quotes(self, query: QuoteQuery) -> QuotePage:
        """List one page of quotes.

        Args:
            query: Normalized listing parameters

        Returns:
            Page of quotes with the pre-pagination total
        """
        with logfire.span(
            "quote_service.list_quotes",
            page=query.page,
            limit=query.limit,
            search=query.search,
            sort_by=query.sort_by.value,
            order=query.order.value,
            filter=query.filter.value if query.filter else None,
        ):
            total = await self.quote_repository.count(query)
            quotes = await self.quote_repository.find_all(query)

            logfire.info("Quotes listed", count=len(quotes), total=total)
            return QuotePage(
                data=quotes, page=query.page, limit=query.limit, total=total
            )

    async def list_quote_ids(self) -> list[QuoteId]:
        """List the IDs of every quote."""
        return await self.quote_repository.find_all_ids()

    async def adjust_counters(
        self, quote_id: QuoteId, upvotes_delta: int = 0, downvotes_delta: int = 0
    ) -> Quote:
        """Atomically shift vote counters (each floored at 0).

        Args:
            quote_id: Quote ID
            upvotes_delta: Change to upvotes
            downvotes_delta: Change to downvotes

        Returns:
            Updated quote

        Raises:
            NotFoundError: If the quote doesn't exist
        """
        with logfire.span(
            "quote_service.adjust_counters",
            quote_id=str(quote_id),
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            updated = await self.quote_repository.adjust_counters(
                quote_id, upvotes_delta=upvotes_delta, downvotes_delta=downvotes_delta
            )
            if updated is None:
                raise NotFoundError("Quote", str(quote_id))
            return updated

    async def set_counters(
        self, quote_id: QuoteId, upvotes: int, downvotes: int
    ) -> Quote:
        """Overwrite vote counters.

        Raises:
            NotFoundError: If the quote doesn't exist
        """
        updated = await self.quote_repository.set_counters(quote_id, upvotes, downvotes)
        if updated is None:
            raise NotFoundError("Quote", str(quote_id))
        return updated
