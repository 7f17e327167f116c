"""PostgreSQL repository implementations."""

from quotevote.persistence.repository.quote import PostgresQuoteRepository
from quotevote.persistence.repository.user import PostgresUserRepository
from quotevote.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuoteRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
