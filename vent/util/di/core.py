"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from vent.config import AuthSettings, FeedSettings, Settings
from vent.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from environment variables and the .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed pagination settings."""
        return settings.feed
