"""Mock insights providers for testing."""

from dishka import Scope, provide

from vybe.adapter.insights import MockInsightsClient
from vybe.domain.service import InsightsProvider
from vybe.util.di.infrastructure.insights import InsightsClientProvider


class MockInsightsClientProvider(InsightsClientProvider):
    """Mock insights provider using the scriptable client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_insights_client(self) -> InsightsProvider:
        """Provide mock insights client."""
        return MockInsightsClient()
