"""Infrastructure providers."""

# Import bases
from .insights import InsightsClientProvider
from .notification import NotificationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .insights import ProdInsightsClientProvider  # noqa: F401
from .notification import ProdNotificationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "InsightsClientProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdInsightsClientProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
