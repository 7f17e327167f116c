"""Domain model entities."""

from quotevote.domain.model.quote import DEFAULT_AUTHOR, Quote, QuotePage
from quotevote.domain.model.user import User
from quotevote.domain.model.vote import Vote

__all__ = [
    "DEFAULT_AUTHOR",
    "Quote",
    "QuotePage",
    "User",
    "Vote",
]
