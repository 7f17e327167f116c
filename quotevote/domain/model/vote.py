"""Vote entity.

A vote records a user's current stance on a quote. It is a single mutable
record per (user, quote), not an append-only history.
"""

from datetime import datetime

from pydantic import Field

from quotevote.domain.model.common import DomainModel
from quotevote.domain.value import QuoteId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user per quote (enforced by the vote engine,
      backed by a unique constraint in PostgreSQL)
    - A direction change flips vote_type in place
    - Removed only when its quote is deleted
    """

    id: VoteId
    user_id: UserId
    quote_id: QuoteId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
