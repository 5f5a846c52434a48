"""Insights provider adapter."""

from .client import MockInsightsClient, ScriptedResponse, SupabaseInsightsClient

__all__ = [
    "MockInsightsClient",
    "ScriptedResponse",
    "SupabaseInsightsClient",
]
