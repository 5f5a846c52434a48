"""Accept / decline invitation use cases.

The tracker is updated first so the UI reacts immediately; the backend write
follows. A failed write is reported but not rolled back locally, so the
session may disagree with the backend until the next reconciliation.
"""

from typing import ClassVar

import logfire
from pydantic import BaseModel

from vybe.application.usecase.base import BaseUseCase
from vybe.domain.error import InvitationPersistenceError, NotFoundError
from vybe.domain.model import InvitationState
from vybe.domain.repository import InvitationResponseRepository
from vybe.domain.service import InvitationStateTracker, Notifier, send_notice
from vybe.domain.value import InvitationId, InvitationStatus, Notice, NoticeLevel


class RespondToInvitationRequest(BaseModel):
    """Accept or decline request."""

    invitation_id: str


class RespondToInvitationResponse(BaseModel):
    """Tracker state after the response."""

    invitation_id: str
    status: InvitationStatus
    accepted: list[str]
    declined: list[str]
    persisted: bool


class RespondToInvitationUseCase(BaseUseCase):
    """Shared flow for answering an invitation."""

    status: ClassVar[InvitationStatus]

    def __init__(
        self,
        invitation_tracker: InvitationStateTracker,
        invitation_repository: InvitationResponseRepository,
        notifier: Notifier,
    ) -> None:
        """Initialize respond use case.

        Args:
            invitation_tracker: Session's invitation tracker
            invitation_repository: Backend store for responses
            notifier: Receives a notice when the write fails
        """
        self.invitation_tracker = invitation_tracker
        self.invitation_repository = invitation_repository
        self.notifier = notifier

    async def execute(
        self, request: RespondToInvitationRequest
    ) -> RespondToInvitationResponse:
        """Apply the response locally, then persist it.

        Args:
            request: Invitation to answer

        Returns:
            Resulting state and whether the backend write succeeded
        """
        invitation_id = InvitationId(request.invitation_id)

        with logfire.span(
            "respond_to_invitation",
            invitation_id=invitation_id,
            status=self.status.value,
        ):
            with self.invitation_tracker.writing():
                state = self._apply(invitation_id)
                persisted = await self._persist(invitation_id)

        return RespondToInvitationResponse(
            invitation_id=invitation_id,
            status=self.status,
            accepted=sorted(state.accepted),
            declined=sorted(state.declined),
            persisted=persisted,
        )

    def _apply(self, invitation_id: InvitationId) -> InvitationState:
        raise NotImplementedError

    async def _persist(self, invitation_id: InvitationId) -> bool:
        try:
            await self.invitation_repository.save_response(invitation_id, self.status)
        except (InvitationPersistenceError, NotFoundError) as e:
            logfire.warn(
                "Invitation response not persisted, local state may drift",
                invitation_id=invitation_id,
                status=self.status.value,
                error=str(e),
            )
            send_notice(
                self.notifier,
                Notice(
                    level=NoticeLevel.ERROR,
                    title="Could not save your response",
                    description=invitation_id,
                ),
            )
            return False

        logfire.info(
            "Invitation response persisted",
            invitation_id=invitation_id,
            status=self.status.value,
        )
        return True


class AcceptInvitationUseCase(RespondToInvitationUseCase):
    """Use case for accepting an invitation."""

    status = InvitationStatus.ACCEPTED

    def _apply(self, invitation_id: InvitationId) -> InvitationState:
        return self.invitation_tracker.accept(invitation_id)


class DeclineInvitationUseCase(RespondToInvitationUseCase):
    """Use case for declining an invitation."""

    status = InvitationStatus.DECLINED

    def _apply(self, invitation_id: InvitationId) -> InvitationState:
        return self.invitation_tracker.decline(invitation_id)
