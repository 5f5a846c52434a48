"""Insights provider infrastructure."""

from dishka import Scope, provide

from vybe.adapter.insights import SupabaseInsightsClient
from vybe.config import Settings
from vybe.domain.service import InsightsProvider
from vybe.util.di.base import ProviderBase
from vybe.util.error import ConfigurationError
from vybe.util.observability import instrument_httpx


class InsightsClientProvider(ProviderBase):
    """Insights component base."""

    __mock_component__ = "insights"


class ProdInsightsClientProvider(InsightsClientProvider):
    """Production insights provider calling the edge function."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_insights_client(self, settings: Settings) -> InsightsProvider:
        """Provide edge function insights client.

        Raises:
            ConfigurationError: If the backend URL or key is not configured
        """
        if not settings.supabase.url:
            raise ConfigurationError("SUPABASE__URL must be configured")
        if not settings.supabase.anon_key:
            raise ConfigurationError("SUPABASE__ANON_KEY must be configured")

        instrument_httpx()
        return SupabaseInsightsClient(
            functions_url=settings.supabase.functions_url,
            anon_key=settings.supabase.anon_key,
            function_name=settings.insights.function_name,
            timeout=settings.insights.request_timeout_seconds,
        )
