"""Reconcile invitations use case."""

import logfire
from pydantic import BaseModel

from vybe.application.usecase.base import BaseUseCase
from vybe.domain.model import InvitationState
from vybe.domain.repository import InvitationResponseRepository
from vybe.domain.service import InvitationStateTracker
from vybe.domain.value import UserId

MAX_ATTEMPTS = 3


class ReconcileInvitationsRequest(BaseModel):
    """Reconcile request."""

    recipient_id: str  # User ID from auth


class ReconcileInvitationsResponse(BaseModel):
    """Tracker state after reconciliation."""

    accepted: list[str]
    declined: list[str]
    changed: bool
    # False when local answers kept changing while the backend was read
    applied: bool = True


class ReconcileInvitationsUseCase(BaseUseCase):
    """Re-derive the session's invitation state from the backend.

    Run on mount and when the app regains focus. Backend answers replace
    whatever was applied optimistically in this session, unless the user
    answered an invitation while the backend was being read or that answer
    is still being written. In that case the read is repeated so the newer
    answer is not lost.
    """

    def __init__(
        self,
        invitation_tracker: InvitationStateTracker,
        invitation_repository: InvitationResponseRepository,
    ) -> None:
        """Initialize reconcile use case.

        Args:
            invitation_tracker: Session's invitation tracker
            invitation_repository: Backend store for responses
        """
        self.invitation_tracker = invitation_tracker
        self.invitation_repository = invitation_repository

    async def execute(
        self, request: ReconcileInvitationsRequest
    ) -> ReconcileInvitationsResponse:
        """Execute reconciliation.

        Args:
            request: Reconcile request

        Returns:
            State after reconciliation, whether it differed, and whether the
            backend state was applied
        """
        recipient_id = UserId(request.recipient_id)
        tracker = self.invitation_tracker

        with logfire.span("reconcile_invitations", recipient_id=recipient_id):
            for attempt in range(1, MAX_ATTEMPTS + 1):
                version = tracker.version
                statuses = await self.invitation_repository.find_responses(
                    recipient_id
                )
                if tracker.version == version and not tracker.writes_in_flight:
                    return self._apply(
                        recipient_id, InvitationState.from_statuses(statuses)
                    )

                logfire.info(
                    "Invitation state changed during reconciliation, re-reading",
                    recipient_id=recipient_id,
                    attempt=attempt,
                )

            logfire.warn(
                "Reconciliation skipped, local state kept changing",
                recipient_id=recipient_id,
                attempts=MAX_ATTEMPTS,
            )

        return ReconcileInvitationsResponse(
            accepted=sorted(tracker.state.accepted),
            declined=sorted(tracker.state.declined),
            changed=False,
            applied=False,
        )

    def _apply(
        self, recipient_id: UserId, authoritative: InvitationState
    ) -> ReconcileInvitationsResponse:
        changed = authoritative != self.invitation_tracker.state
        if changed:
            logfire.info(
                "Invitation state drifted from backend",
                recipient_id=recipient_id,
                local_accepted=len(self.invitation_tracker.state.accepted),
                local_declined=len(self.invitation_tracker.state.declined),
            )
            self.invitation_tracker.restore(authoritative)

        return ReconcileInvitationsResponse(
            accepted=sorted(authoritative.accepted),
            declined=sorted(authoritative.declined),
            changed=changed,
        )
