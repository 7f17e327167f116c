"""Quote use cases."""

from .common import QuoteResponse
from .create_quote import CreateQuoteRequest, CreateQuoteUseCase
from .delete_quote import DeleteQuoteRequest, DeleteQuoteResponse, DeleteQuoteUseCase
from .list_quotes import ListQuotesRequest, ListQuotesResponse, ListQuotesUseCase
from .update_quote import UpdateQuoteRequest, UpdateQuoteUseCase

__all__ = [
    "QuoteResponse",
    "CreateQuoteRequest",
    "CreateQuoteUseCase",
    "DeleteQuoteRequest",
    "DeleteQuoteResponse",
    "DeleteQuoteUseCase",
    "ListQuotesRequest",
    "ListQuotesResponse",
    "ListQuotesUseCase",
    "UpdateQuoteRequest",
    "UpdateQuoteUseCase",
]
