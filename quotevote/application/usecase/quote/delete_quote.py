"""Delete quote use case."""

from uuid import UUID

from pydantic import BaseModel

from quotevote.domain.service import QuoteService
from quotevote.domain.value import QuoteId


class DeleteQuoteRequest(BaseModel):
    """Delete quote request."""

    quote_id: UUID


class DeleteQuoteResponse(BaseModel):
    """Delete quote response."""

    deleted: bool


class DeleteQuoteUseCase:
    """Use case for deleting a quote together with its votes."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize delete quote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: DeleteQuoteRequest) -> DeleteQuoteResponse:
        """Execute delete quote flow.

        Raises:
            NotFoundError: If the quote doesn't exist
            VoteTimeoutError: If the quote is locked by in-flight votes too long
        """
        await self.quote_service.delete_quote(QuoteId(request.quote_id))
        return DeleteQuoteResponse(deleted=True)
