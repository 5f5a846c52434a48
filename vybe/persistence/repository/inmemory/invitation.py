"""In-memory invitation response repository for testing."""

from dataclasses import dataclass

from vybe.domain.error import InvitationPersistenceError, NotFoundError
from vybe.domain.repository import InvitationResponseRepository
from vybe.domain.value import InvitationId, InvitationStatus, UserId


@dataclass
class _StoredInvitation:
    recipient_id: UserId
    status: InvitationStatus


class InMemoryInvitationResponseRepository(InvitationResponseRepository):
    """In-memory implementation of InvitationResponseRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, _StoredInvitation] = {}
        # Simulates a backend outage when set
        self.fail_writes = False

    def add_invitation(
        self,
        invitation_id: str,
        recipient_id: str,
        status: InvitationStatus = InvitationStatus.PENDING,
    ) -> None:
        """Seed an invitation row."""
        self._invitations[InvitationId(invitation_id)] = _StoredInvitation(
            recipient_id=UserId(recipient_id), status=status
        )

    def status_of(self, invitation_id: str) -> InvitationStatus | None:
        """Stored status, None for unknown invitations."""
        stored = self._invitations.get(InvitationId(invitation_id))
        return stored.status if stored else None

    async def save_response(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> None:
        """Update the stored status.

        Raises:
            InvitationPersistenceError: If fail_writes is set
            NotFoundError: If the invitation was never seeded
        """
        if self.fail_writes:
            raise InvitationPersistenceError(invitation_id, "backend unavailable")

        stored = self._invitations.get(invitation_id)
        if stored is None:
            raise NotFoundError("Invitation", invitation_id)
        stored.status = status

    async def find_responses(
        self, recipient_id: UserId
    ) -> dict[InvitationId, InvitationStatus]:
        """Answered invitations for a recipient."""
        return {
            invitation_id: stored.status
            for invitation_id, stored in self._invitations.items()
            if stored.recipient_id == recipient_id
            and stored.status in (InvitationStatus.ACCEPTED, InvitationStatus.DECLINED)
        }
