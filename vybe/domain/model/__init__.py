"""Domain model entities."""

from vybe.domain.model.insights import InsightsPayload, InsightsRecord, InsightsView
from vybe.domain.model.invitation import InvitationState

__all__ = [
    "InsightsPayload",
    "InsightsRecord",
    "InsightsView",
    "InvitationState",
]
