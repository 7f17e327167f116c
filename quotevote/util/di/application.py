"""Application layer DI providers."""

from dishka import Scope, provide

from quotevote.application.usecase.auth import LoginUseCase, RegisterUseCase
from quotevote.application.usecase.quote import (
    CreateQuoteUseCase,
    DeleteQuoteUseCase,
    ListQuotesUseCase,
    UpdateQuoteUseCase,
)
from quotevote.application.usecase.vote import (
    CastVoteUseCase,
    ReconcileCountersUseCase,
)
from quotevote.config import QuerySettings
from quotevote.domain.service import AuthService, QuoteService, VoteService
from quotevote.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    # Quote use cases
    @provide(scope=Scope.REQUEST)
    def get_list_quotes_use_case(
        self, quote_service: QuoteService, query_settings: QuerySettings
    ) -> ListQuotesUseCase:
        """Provide list quotes use case."""
        return ListQuotesUseCase(
            quote_service=quote_service, query_settings=query_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_create_quote_use_case(
        self, quote_service: QuoteService
    ) -> CreateQuoteUseCase:
        """Provide create quote use case."""
        return CreateQuoteUseCase(quote_service=quote_service)

    @provide(scope=Scope.REQUEST)
    def get_update_quote_use_case(
        self, quote_service: QuoteService
    ) -> UpdateQuoteUseCase:
        """Provide update quote use case."""
        return UpdateQuoteUseCase(quote_service=quote_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_quote_use_case(
        self, quote_service: QuoteService
    ) -> DeleteQuoteUseCase:
        """Provide delete quote use case."""
        return DeleteQuoteUseCase(quote_service=quote_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_reconcile_counters_use_case(
        self, quote_service: QuoteService, vote_service: VoteService
    ) -> ReconcileCountersUseCase:
        """Provide reconcile counters use case."""
        return ReconcileCountersUseCase(
            quote_service=quote_service, vote_service=vote_service
        )
