"""Quote listing query.

Builds validated filter, sort and pagination parameters from raw request
input. Bad input never raises: every parameter falls back to its default.
"""

from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import Field

from quotevote.domain.value.common import ValueObject

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Largest OFFSET PostgreSQL accepts (bigint)
MAX_OFFSET = 2**63 - 1


class QuoteSortField(str, Enum):
    """Sortable quote fields, named as the API exposes them."""

    UPVOTES = "upvotes"
    DOWNVOTES = "downvotes"
    CREATED_AT = "createdAt"

    @property
    def attribute(self) -> str:
        """Model attribute / column name for this field."""
        return "created_at" if self is QuoteSortField.CREATED_AT else self.value


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class QuoteFilter(str, Enum):
    """Vote-based listing filters.

    VOTED keeps quotes with upvotes > 0 and NOT_VOTED keeps quotes with
    downvotes > 0. Neither looks at who voted.
    """

    VOTED = "voted"
    NOT_VOTED = "not_voted"


E = TypeVar("E", bound=Enum)


def _coerce_positive_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _coerce_enum(enum_cls: type[E], value: Any, default: Optional[E]) -> Optional[E]:
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        return default


class QuoteQuery(ValueObject):
    """Normalized parameters for listing quotes."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    search: Optional[str] = None
    sort_by: QuoteSortField = QuoteSortField.UPVOTES
    order: SortOrder = SortOrder.DESC
    filter: Optional[QuoteFilter] = None

    @property
    def offset(self) -> int:
        """Number of matching quotes to skip."""
        return (self.page - 1) * self.limit

    @property
    def descending(self) -> bool:
        """Whether results are sorted high-to-low."""
        return self.order is SortOrder.DESC

    @classmethod
    def from_params(
        cls,
        page: Any = None,
        limit: Any = None,
        search: Optional[str] = None,
        sort_by: Any = None,
        order: Any = None,
        filter: Any = None,
        max_limit: int = MAX_LIMIT,
        default_page: int = DEFAULT_PAGE,
        default_limit: int = DEFAULT_LIMIT,
    ) -> "QuoteQuery":
        """Build a query from raw request parameters.

        Args:
            page: 1-based page number (string or int); pages starting
                past MAX_OFFSET fall back to default_page
            limit: Page size (string or int), clamped to max_limit
            search: Case-insensitive substring to match in quote text
            sort_by: One of upvotes, downvotes, createdAt
            order: asc or desc
            filter: voted or not_voted
            max_limit: Largest page size allowed
            default_page: Page used when page is missing or invalid
            default_limit: Page size used when limit is missing or invalid

        Returns:
            Normalized query
        """
        search_text = search.strip() if search else None
        page_number = _coerce_positive_int(page, default_page)
        page_size = min(_coerce_positive_int(limit, default_limit), max_limit)
        if (page_number - 1) * page_size > MAX_OFFSET:
            page_number = default_page

        return cls(
            page=page_number,
            limit=page_size,
            search=search_text or None,
            sort_by=_coerce_enum(QuoteSortField, sort_by, QuoteSortField.UPVOTES),
            order=_coerce_enum(SortOrder, order, SortOrder.DESC),
            filter=_coerce_enum(QuoteFilter, filter, None),
        )
