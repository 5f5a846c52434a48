"""Invitation use cases."""

from vybe.application.usecase.invitation.reconcile_invitations import (
    ReconcileInvitationsRequest,
    ReconcileInvitationsResponse,
    ReconcileInvitationsUseCase,
)
from vybe.application.usecase.invitation.respond_to_invitation import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
)

__all__ = [
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "ReconcileInvitationsRequest",
    "ReconcileInvitationsResponse",
    "ReconcileInvitationsUseCase",
    "RespondToInvitationRequest",
    "RespondToInvitationResponse",
    "RespondToInvitationUseCase",
]
