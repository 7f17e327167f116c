"""Mock persistence providers for testing."""

from dishka import Scope, provide

from quotevote.domain.repository import (
    QuoteRepository,
    UserRepository,
    VoteRepository,
)
from quotevote.persistence.repository.inmemory import (
    InMemoryQuoteRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from quotevote.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of
    one TestClient. Each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_quote_repository(self) -> QuoteRepository:
        """Provide in-memory quote repository."""
        return InMemoryQuoteRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
