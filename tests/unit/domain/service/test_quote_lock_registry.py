"""Unit tests for QuoteLockRegistry."""

import asyncio
from uuid import uuid4

import pytest

from quotevote.domain.error import VoteTimeoutError
from quotevote.domain.service import QuoteLockRegistry
from quotevote.domain.value import QuoteId


class TestQuoteLockRegistry:
    """Tests for per-quote locking."""

    @pytest.mark.asyncio
    async def test_same_quote_is_serialized(self):
        """Two holders of one quote's lock must never overlap."""
        # Arrange
        locks = QuoteLockRegistry()
        quote_id = QuoteId(uuid4())
        active = 0
        peak = 0

        async def critical_section() -> None:
            nonlocal active, peak
            async with locks.hold(quote_id):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0.01)
                active -= 1

        # Act
        await asyncio.gather(*(critical_section() for _ in range(5)))

        # Assert
        assert peak == 1

    @pytest.mark.asyncio
    async def test_different_quotes_do_not_block_each_other(self):
        """Locks for distinct quotes should be held at the same time."""
        locks = QuoteLockRegistry()
        first, second = QuoteId(uuid4()), QuoteId(uuid4())

        async with locks.hold(first):
            async with locks.hold(second, timeout=0.05):
                assert locks.is_locked(first)
                assert locks.is_locked(second)

    @pytest.mark.asyncio
    async def test_idle_locks_are_dropped(self):
        """The registry should forget a quote once nobody holds or waits."""
        locks = QuoteLockRegistry()
        quote_id = QuoteId(uuid4())

        async with locks.hold(quote_id):
            assert len(locks) == 1

        assert len(locks) == 0
        assert not locks.is_locked(quote_id)

    @pytest.mark.asyncio
    async def test_timeout_raises_and_skips_body(self):
        """A timed-out waiter should get VoteTimeoutError without running."""
        # Arrange
        locks = QuoteLockRegistry()
        quote_id = QuoteId(uuid4())
        ran = False

        # Act & Assert
        async with locks.hold(quote_id):
            with pytest.raises(VoteTimeoutError) as exc_info:
                async with locks.hold(quote_id, timeout=0.01):
                    ran = True

        assert not ran
        assert exc_info.value.quote_id == str(quote_id)
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_lock_released_when_body_raises(self):
        """An exception in the body must still release the lock."""
        locks = QuoteLockRegistry()
        quote_id = QuoteId(uuid4())

        with pytest.raises(RuntimeError):
            async with locks.hold(quote_id):
                raise RuntimeError("boom")

        async with locks.hold(quote_id, timeout=0.01):
            assert locks.is_locked(quote_id)
