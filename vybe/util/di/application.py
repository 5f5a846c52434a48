"""Application layer DI providers."""

from dishka import Scope, provide

from vybe.application.usecase.insights import GetInsightsUseCase, RefreshInsightsUseCase
from vybe.application.usecase.invitation import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    ReconcileInvitationsUseCase,
)
from vybe.domain.repository import InvitationResponseRepository
from vybe.domain.service import InsightsCache, InvitationStateTracker, Notifier
from vybe.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Insights use cases
    @provide(scope=Scope.REQUEST)
    def get_get_insights_use_case(
        self, insights_cache: InsightsCache
    ) -> GetInsightsUseCase:
        """Provide get insights use case."""
        return GetInsightsUseCase(insights_cache=insights_cache)

    @provide(scope=Scope.REQUEST)
    def get_refresh_insights_use_case(
        self, insights_cache: InsightsCache
    ) -> RefreshInsightsUseCase:
        """Provide refresh insights use case."""
        return RefreshInsightsUseCase(insights_cache=insights_cache)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self,
        invitation_tracker: InvitationStateTracker,
        invitation_repository: InvitationResponseRepository,
        notifier: Notifier,
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(
            invitation_tracker=invitation_tracker,
            invitation_repository=invitation_repository,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_decline_invitation_use_case(
        self,
        invitation_tracker: InvitationStateTracker,
        invitation_repository: InvitationResponseRepository,
        notifier: Notifier,
    ) -> DeclineInvitationUseCase:
        """Provide decline invitation use case."""
        return DeclineInvitationUseCase(
            invitation_tracker=invitation_tracker,
            invitation_repository=invitation_repository,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_reconcile_invitations_use_case(
        self,
        invitation_tracker: InvitationStateTracker,
        invitation_repository: InvitationResponseRepository,
    ) -> ReconcileInvitationsUseCase:
        """Provide reconcile invitations use case."""
        return ReconcileInvitationsUseCase(
            invitation_tracker=invitation_tracker,
            invitation_repository=invitation_repository,
        )
