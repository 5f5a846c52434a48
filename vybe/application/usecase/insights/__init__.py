"""Insights use cases."""

from vybe.application.usecase.insights.get_insights import (
    GetInsightsRequest,
    GetInsightsUseCase,
    InsightsResponse,
)
from vybe.application.usecase.insights.refresh_insights import (
    RefreshInsightsRequest,
    RefreshInsightsUseCase,
)

__all__ = [
    "GetInsightsRequest",
    "GetInsightsUseCase",
    "InsightsResponse",
    "RefreshInsightsRequest",
    "RefreshInsightsUseCase",
]
