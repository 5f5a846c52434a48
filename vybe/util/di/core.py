"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from vybe.config import InsightsSettings, Settings
from vybe.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_insights_settings(self, settings: Settings) -> InsightsSettings:
        """Provide insights settings."""
        return settings.insights
