"""Domain layer DI providers."""

from dishka import Scope, provide

from quotevote.config import AuthSettings, VotingSettings
from quotevote.domain.repository import (
    QuoteRepository,
    UserRepository,
    VoteRepository,
)
from quotevote.domain.service import (
    AuthService,
    JWTService,
    QuoteLockRegistry,
    QuoteService,
    VoteService,
)
from quotevote.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The quote lock registry is the exception: it is shared by every request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_quote_lock_registry(self) -> QuoteLockRegistry:
        """Provide the process-wide per-quote lock registry."""
        return QuoteLockRegistry()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide registration/login domain service."""
        return AuthService(
            user_repository=user_repository,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_quote_service(
        self,
        quote_repository: QuoteRepository,
        vote_repository: VoteRepository,
        quote_locks: QuoteLockRegistry,
        voting_settings: VotingSettings,
    ) -> QuoteService:
        """Provide quote domain service."""
        return QuoteService(
            quote_repository=quote_repository,
            vote_repository=vote_repository,
            quote_locks=quote_locks,
            voting_settings=voting_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        quote_service: QuoteService,
        quote_locks: QuoteLockRegistry,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            quote_service=quote_service,
            quote_locks=quote_locks,
            voting_settings=voting_settings,
        )
