"""Create quote use case."""

from typing import Optional

from pydantic import BaseModel

from quotevote.application.usecase.quote.common import QuoteResponse
from quotevote.domain.service import QuoteService


class CreateQuoteRequest(BaseModel):
    """Create quote request."""

    text: str = ""
    author: Optional[str] = None


class CreateQuoteUseCase:
    """Use case for creating a quote."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize create quote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: CreateQuoteRequest) -> QuoteResponse:
        """Execute create quote flow.

        Raises:
            InvalidArgumentError: If text is blank
        """
        quote = await self.quote_service.create_quote(request.text, request.author)
        return QuoteResponse.from_domain(quote)
