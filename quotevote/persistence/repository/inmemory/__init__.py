"""In-memory repository implementations for testing."""

from .quote import InMemoryQuoteRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryQuoteRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
