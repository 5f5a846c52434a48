"""Domain services."""

from .base import Service
from .insights_cache import InsightsCache, InsightsProvider
from .invitation_tracker import InvitationStateTracker
from .notification import Notifier, send_notice
from .subscription import SubscriberRegistry, Unsubscribe

__all__ = [
    "InsightsCache",
    "InsightsProvider",
    "InvitationStateTracker",
    "Notifier",
    "Service",
    "SubscriberRegistry",
    "Unsubscribe",
    "send_notice",
]
