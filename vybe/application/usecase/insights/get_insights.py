"""Get insights use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from vybe.application.usecase.base import BaseUseCase
from vybe.domain.model import InsightsView
from vybe.domain.service import InsightsCache
from vybe.domain.value import Identity, IdentityStatus, InsightsState


class GetInsightsRequest(BaseModel):
    """Get insights request."""

    identity: Identity
    # Wait for any pending fetch instead of returning the current view
    wait: bool = False


class InsightsResponse(BaseModel):
    """Insights as presented to a UI surface."""

    insights: Any = None
    loading: bool
    error: str | None = None
    state: InsightsState
    is_fetching: bool = False
    fetched_at: datetime | None = None
    identity_status: IdentityStatus

    @classmethod
    def from_view(cls, view: InsightsView) -> "InsightsResponse":
        return cls(
            insights=view.value,
            loading=view.loading,
            error=view.error,
            state=view.state,
            is_fetching=view.is_fetching,
            fetched_at=view.fetched_at,
            identity_status=view.identity_status,
        )


class GetInsightsUseCase(BaseUseCase):
    """Use case for reading the current user's insights."""

    def __init__(self, insights_cache: InsightsCache) -> None:
        """Initialize get insights use case.

        Args:
            insights_cache: Shared insights cache
        """
        self.insights_cache = insights_cache

    async def execute(self, request: GetInsightsRequest) -> InsightsResponse:
        """Execute get insights flow.

        Args:
            request: Get insights request

        Returns:
            Cached insights with loading and error flags
        """
        if request.wait:
            view = await self.insights_cache.resolve(request.identity)
        else:
            view = self.insights_cache.get(request.identity)
        return InsightsResponse.from_view(view)
