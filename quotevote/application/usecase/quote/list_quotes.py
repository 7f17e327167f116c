"""List quotes use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from quotevote.application.usecase.base import BaseUseCase
from quotevote.application.usecase.quote.common import QuoteResponse
from quotevote.config import QuerySettings
from quotevote.domain.service import QuoteService
from quotevote.domain.value import QuoteQuery


class ListQuotesRequest(BaseModel):
    """List quotes request.

    Parameters are kept raw; bad values fall back to defaults when the
    query is built instead of failing validation.
    """

    page: Optional[int | str] = None
    limit: Optional[int | str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    order: Optional[str] = None
    filter: Optional[str] = None


class ListQuotesResponse(BaseModel):
    """One page of quotes."""

    data: list[QuoteResponse]
    page: int
    limit: int
    total: int
    total_pages: int = Field(serialization_alias="totalPages")


class ListQuotesUseCase(BaseUseCase[ListQuotesRequest, ListQuotesResponse]):
    """Use case for listing quotes with search, filter, sort and pagination."""

    def __init__(
        self, quote_service: QuoteService, query_settings: QuerySettings
    ) -> None:
        """Initialize list quotes use case.

        Args:
            quote_service: Quote domain service
            query_settings: Paging defaults and page size cap
        """
        self.quote_service = quote_service
        self.query_settings = query_settings

    async def execute(self, request: ListQuotesRequest) -> ListQuotesResponse:
        """Execute list quotes flow.

        Args:
            request: Raw listing parameters

        Returns:
            Requested page with the pre-pagination total
        """
        query = QuoteQuery.from_params(
            page=request.page,
            limit=request.limit,
            search=request.search,
            sort_by=request.sort_by,
            order=request.order,
            filter=request.filter,
            max_limit=self.query_settings.max_limit,
            default_page=self.query_settings.default_page,
            default_limit=self.query_settings.default_limit,
        )
        with logfire.span("list_quotes.execute", page=query.page, limit=query.limit):
            result = await self.quote_service.list_quotes(query)

            return ListQuotesResponse(
                data=[QuoteResponse.from_domain(q) for q in result.data],
                page=result.page,
                limit=result.limit,
                total=result.total,
                total_pages=result.total_pages,
            )
