"""Domain layer DI providers."""

from collections.abc import AsyncIterator
from datetime import timedelta

from dishka import Scope, provide

from vybe.config import InsightsSettings
from vybe.domain.service import (
    InsightsCache,
    InsightsProvider,
    InvitationStateTracker,
    Notifier,
)
from vybe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    The insights cache is APP-scoped so every UI surface shares one record
    store. The invitation tracker lives for one UI session.
    """

    @provide(scope=Scope.APP)
    async def get_insights_cache(
        self,
        insights_provider: InsightsProvider,
        notifier: Notifier,
        insights_settings: InsightsSettings,
    ) -> AsyncIterator[InsightsCache]:
        """Provide the shared insights cache, cancelling its fetches on close."""
        cache = InsightsCache(
            provider=insights_provider,
            notifier=notifier,
            stale_time=timedelta(seconds=insights_settings.stale_time_seconds),
            failure_message=insights_settings.failure_message,
        )
        yield cache
        await cache.aclose()

    @provide(scope=Scope.SESSION)
    def get_invitation_tracker(self, notifier: Notifier) -> InvitationStateTracker:
        """Provide the session's invitation tracker."""
        return InvitationStateTracker(notifier=notifier)
