"""Invitation response repository interface."""

from abc import ABC, abstractmethod

from vybe.domain.value import InvitationId, InvitationStatus, UserId


class InvitationResponseRepository(ABC):
    """Durable store for a recipient's answers to date invitations.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save_response(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> None:
        """Record the recipient's answer.

        Args:
            invitation_id: Invitation being answered
            status: ACCEPTED or DECLINED

        Raises:
            NotFoundError: If the invitation does not exist
            InvitationPersistenceError: If the write failed
        """
        pass

    @abstractmethod
    async def find_responses(
        self, recipient_id: UserId
    ) -> dict[InvitationId, InvitationStatus]:
        """Load every answered invitation addressed to a user.

        Args:
            recipient_id: Invitation recipient

        Returns:
            Status per invitation, only ACCEPTED and DECLINED entries
        """
        pass
