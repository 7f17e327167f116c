"""Update quote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quotevote.application.usecase.quote.common import QuoteResponse
from quotevote.domain.service import QuoteService
from quotevote.domain.value import QuoteId


class UpdateQuoteRequest(BaseModel):
    """Update quote request.

    Omitted fields are left unchanged.
    """

    quote_id: UUID
    text: Optional[str] = None
    author: Optional[str] = None


class UpdateQuoteUseCase:
    """Use case for editing the text or author of a quote."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize update quote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: UpdateQuoteRequest) -> QuoteResponse:
        """Execute update quote flow.

        Args:
            request: Quote ID and the fields to change

        Returns:
            Updated quote

        Raises:
            InvalidArgumentError: If text is provided but blank
            NotFoundError: If the quote doesn't exist
        """
        quote = await self.quote_service.update_quote(
            QuoteId(request.quote_id), text=request.text, author=request.author
        )
        return QuoteResponse.from_domain(quote)
