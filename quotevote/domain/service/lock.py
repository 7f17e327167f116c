"""Per-quote mutual exclusion.

Usage:
    async with quote_locks.hold(quote_id, timeout=5.0):
        # read-modify-write of the quote and its votes
        ...
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import logfire

from quotevote.domain.error import VoteTimeoutError
from quotevote.domain.value import QuoteId


class QuoteLockRegistry:
    """Hands out one asyncio lock per quote.

    Locks are reference-counted and dropped once nobody holds or waits
    for them, so the registry only grows with the number of quotes being
    written concurrently. One registry must be shared by every request
    of the process.
    """

    def __init__(self) -> None:
        self._locks: dict[QuoteId, asyncio.Lock] = {}
        self._holders: dict[QuoteId, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def is_locked(self, quote_id: QuoteId) -> bool:
        """Whether someone currently holds the lock for a quote."""
        lock = self._locks.get(quote_id)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(
        self, quote_id: QuoteId, timeout: Optional[float] = None
    ) -> AsyncIterator[None]:
        """Hold the lock for a quote for the duration of the block.

        Args:
            quote_id: Quote to lock
            timeout: Max seconds to wait for the lock (None waits forever)

        Raises:
            VoteTimeoutError: If the lock wasn't acquired within timeout.
                The block body never runs in that case.
        """
        lock = self._locks.setdefault(quote_id, asyncio.Lock())
        self._holders[quote_id] = self._holders.get(quote_id, 0) + 1
        try:
            try:
                async with asyncio.timeout(timeout):
                    await lock.acquire()
            except TimeoutError:
                logfire.warn(
                    "Quote lock wait timed out", quote_id=str(quote_id), timeout=timeout
                )
                raise VoteTimeoutError(str(quote_id), timeout or 0.0)

            try:
                yield
            finally:
                lock.release()
        finally:
            self._holders[quote_id] -= 1
            if self._holders[quote_id] == 0:
                del self._holders[quote_id]
                del self._locks[quote_id]
