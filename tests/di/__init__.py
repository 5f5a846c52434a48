"""Mock providers for testing."""

from .insights import MockInsightsClientProvider
from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockInsightsClientProvider",
    "MockNotificationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
