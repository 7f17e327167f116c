"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quotevote.config import AuthSettings, QuerySettings, Settings, VotingSettings
from quotevote.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide vote engine settings."""
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_query_settings(self, settings: Settings) -> QuerySettings:
        """Provide quote listing settings."""
        return settings.query
