"""Refresh insights use case."""

from pydantic import BaseModel

from vybe.application.usecase.base import BaseUseCase
from vybe.application.usecase.insights.get_insights import InsightsResponse
from vybe.domain.service import InsightsCache
from vybe.domain.value import Identity


class RefreshInsightsRequest(BaseModel):
    """Refresh insights request."""

    identity: Identity
    wait: bool = False


class RefreshInsightsUseCase(BaseUseCase):
    """Use case for the manual "refresh" action."""

    def __init__(self, insights_cache: InsightsCache) -> None:
        """Initialize refresh insights use case.

        Args:
            insights_cache: Shared insights cache
        """
        self.insights_cache = insights_cache

    async def execute(self, request: RefreshInsightsRequest) -> InsightsResponse:
        """Execute refresh flow.

        Args:
            request: Refresh insights request

        Returns:
            Loading view, or the settled view when ``wait`` is set
        """
        view = self.insights_cache.refresh(request.identity)
        if request.wait:
            view = await self.insights_cache.resolve(request.identity)
        return InsightsResponse.from_view(view)
