"""Quote aggregate root.

Quotes are the primary content entity. Their vote counters are a cached
projection of the Vote records pointing at them.
"""

import math
from datetime import datetime

from pydantic import Field, computed_field

from quotevote.domain.model.common import DomainModel
from quotevote.domain.value import QuoteId

DEFAULT_AUTHOR = "Unknown"


class Quote(DomainModel):
    """Quote aggregate root.

    Business rules:
    - Text is never blank
    - Counters never go negative
    - Counters change only through the vote engine or reconciliation
    """

    id: QuoteId
    text: str = Field(min_length=1)
    author: str = DEFAULT_AUTHOR
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class QuotePage(DomainModel):
    """One page of a quote listing."""

    data: list[Quote]
    page: int
    limit: int
    total: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Number of pages needed for all matching quotes."""
        return math.ceil(self.total / self.limit) if self.limit else 0
