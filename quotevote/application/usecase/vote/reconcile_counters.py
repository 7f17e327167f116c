"""Reconcile counters use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.error import NotFoundError
from quotevote.domain.service import QuoteService, VoteService
from quotevote.domain.value import QuoteId


class ReconcileCountersRequest(BaseModel):
    """Reconcile counters request.

    Leave quote_ids unset to reconcile every stored quote.
    """

    quote_ids: Optional[list[UUID]] = None


class ReconcileCountersResponse(BaseModel):
    """Reconciliation summary."""

    checked: int
    repaired: int


class ReconcileCountersUseCase(
    BaseUseCase[ReconcileCountersRequest, ReconcileCountersResponse]
):
    """Use case for recomputing every quote's counters from its votes."""

    def __init__(self, quote_service: QuoteService, vote_service: VoteService) -> None:
        """Initialize reconcile counters use case.

        Args:
            quote_service: Quote domain service
            vote_service: Vote domain service
        """
        self.quote_service = quote_service
        self.vote_service = vote_service

    async def execute(
        self, request: ReconcileCountersRequest
    ) -> ReconcileCountersResponse:
        """Execute reconciliation over the requested quotes.

        Returns:
            How many quotes were checked and how many needed repair
        """
        with logfire.span("reconcile_counters.execute"):
            checked = 0
            repaired = 0
            if request.quote_ids is None:
                quote_ids = await self.quote_service.list_quote_ids()
            else:
                quote_ids = [QuoteId(quote_id) for quote_id in request.quote_ids]

            for quote_id in quote_ids:
                try:
                    before = await self.quote_service.get_quote(quote_id)
                    after = await self.vote_service.reconcile_counters(quote_id)
                except NotFoundError:
                    # Deleted while the pass was running
                    continue

                checked += 1
                if (before.upvotes, before.downvotes) != (
                    after.upvotes,
                    after.downvotes,
                ):
                    repaired += 1

            logfire.info("Counters reconciled", checked=checked, repaired=repaired)
            return ReconcileCountersResponse(checked=checked, repaired=repaired)
