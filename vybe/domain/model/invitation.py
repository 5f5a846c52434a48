"""Invitation response state.

Tracks how the current user answered incoming invitations during a UI
session. An invitation absent from both sets is undecided.
"""

from pydantic import Field, model_validator

from vybe.domain.model.common import DomainModel
from vybe.domain.value import InvitationId, InvitationStatus


class InvitationState(DomainModel):
    """Two disjoint sets of invitation IDs.

    Business rules:
    - An invitation is never both accepted and declined
    - Accepting removes from declined and vice versa, in one transition
    """

    accepted: frozenset[InvitationId] = Field(default_factory=frozenset)
    declined: frozenset[InvitationId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def check_disjoint(self) -> "InvitationState":
        """Reject states where an invitation is in both sets."""
        overlap = self.accepted & self.declined
        if overlap:
            raise ValueError(
                f"Invitations cannot be both accepted and declined: {sorted(overlap)}"
            )
        return self

    def with_accepted(self, invitation_id: InvitationId) -> "InvitationState":
        """Return the state after accepting an invitation."""
        return InvitationState(
            accepted=self.accepted | {invitation_id},
            declined=self.declined - {invitation_id},
        )

    def with_declined(self, invitation_id: InvitationId) -> "InvitationState":
        """Return the state after declining an invitation."""
        return InvitationState(
            accepted=self.accepted - {invitation_id},
            declined=self.declined | {invitation_id},
        )

    def status_of(self, invitation_id: InvitationId) -> InvitationStatus:
        """Membership lookup; undecided invitations read as pending."""
        if invitation_id in self.accepted:
            return InvitationStatus.ACCEPTED
        if invitation_id in self.declined:
            return InvitationStatus.DECLINED
        return InvitationStatus.PENDING

    @classmethod
    def from_statuses(
        cls, statuses: dict[InvitationId, InvitationStatus]
    ) -> "InvitationState":
        """Build a state from backend statuses, ignoring undecided rows."""
        return cls(
            accepted=frozenset(
                i for i, s in statuses.items() if s == InvitationStatus.ACCEPTED
            ),
            declined=frozenset(
                i for i, s in statuses.items() if s == InvitationStatus.DECLINED
            ),
        )
