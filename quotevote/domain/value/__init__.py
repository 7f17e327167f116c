"""Domain value objects."""

from quotevote.domain.value.identifiers import QuoteId, UserId, VoteId
from quotevote.domain.value.query import (
    QuoteFilter,
    QuoteQuery,
    QuoteSortField,
    SortOrder,
)
from quotevote.domain.value.types import (
    CallerIdentity,
    Username,
    VoteDirection,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuoteId",
    "VoteId",
    # Types
    "CallerIdentity",
    "Username",
    "VoteDirection",
    "VoteType",
    # Query
    "QuoteFilter",
    "QuoteQuery",
    "QuoteSortField",
    "SortOrder",
]
