#!/usr/bin/env python3
"""Recompute every quote's vote counters from its Vote records.

Safe to run while the API is serving. Each quote is reconciled in its own
request scope, so its row lock is held only until that quote is committed.
Quotes that stay busy past the vote lock timeout are skipped and reported.
"""

import asyncio
import sys

import logfire
from dishka import AsyncContainer

from quotevote.application.usecase.vote import (
    ReconcileCountersRequest,
    ReconcileCountersResponse,
    ReconcileCountersUseCase,
)
from quotevote.config import Settings
from quotevote.domain.error import VoteTimeoutError
from quotevote.domain.service import QuoteService
from quotevote.domain.value import QuoteId
from quotevote.util.di.container import create_container
from quotevote.util.observability import configure_logfire


async def reconcile_quote(
    container: AsyncContainer, quote_id: QuoteId
) -> ReconcileCountersResponse:
    """Reconcile one quote in its own transaction."""
    async with container() as request_container:
        use_case = await request_container.get(ReconcileCountersUseCase)
        return await use_case.execute(ReconcileCountersRequest(quote_ids=[quote_id]))


async def reconcile() -> int:
    """Run one reconciliation pass and return the number of repaired quotes."""
    container = create_container()
    checked = repaired = skipped = 0
    try:
        async with container() as request_container:
            quote_service = await request_container.get(QuoteService)
            quote_ids = await quote_service.list_quote_ids()

        for quote_id in quote_ids:
            try:
                result = await reconcile_quote(container, quote_id)
            except VoteTimeoutError:
                skipped += 1
                continue
            checked += result.checked
            repaired += result.repaired
    finally:
        await container.close()

    logfire.info(
        "Reconciliation pass finished",
        checked=checked,
        repaired=repaired,
        skipped=skipped,
    )
    print(f"Checked {checked} quotes, repaired {repaired}, skipped {skipped} busy")
    return repaired


def main() -> int:
    """Entry point."""
    configure_logfire(Settings())

    try:
        asyncio.run(reconcile())
        return 0
    except Exception as e:
        logfire.error(
            "Counter reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
