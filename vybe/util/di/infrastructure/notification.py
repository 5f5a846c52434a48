"""Notification infrastructure."""

from dishka import Scope, provide

from vybe.adapter.notification import LogfireNotifier
from vybe.domain.service import Notifier
from vybe.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notifier writing notices to the log."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide notifier."""
        return LogfireNotifier()
