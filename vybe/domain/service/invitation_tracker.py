"""Invitation response tracker domain service."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager

import logfire

from vybe.domain.model import InvitationState
from vybe.domain.value import InvitationId, Notice, NoticeLevel

from .base import Service
from .notification import Notifier, send_notice
from .subscription import SubscriberRegistry, Unsubscribe

_STATE_KEY = "invitations"


class InvitationStateTracker(Service):
    """Optimistic accept/decline state for one UI session.

    The tracker is not the system of record. Callers persist responses
    separately and may later restore the tracker from the backend.
    """

    def __init__(self, notifier: Notifier) -> None:
        """Initialize tracker with no decided invitations.

        Args:
            notifier: Receives one notice per accept/decline call
        """
        self.notifier = notifier
        self._state = InvitationState()
        self._version = 0
        self._writes_in_flight = 0
        self._subscribers: SubscriberRegistry[str, InvitationState] = (
            SubscriberRegistry("invitations")
        )

    @property
    def state(self) -> InvitationState:
        """Current accepted/declined sets."""
        return self._state

    @property
    def version(self) -> int:
        """Number of state replacements so far."""
        return self._version

    @property
    def writes_in_flight(self) -> int:
        """Backend writes for this session that have not finished."""
        return self._writes_in_flight

    @contextmanager
    def writing(self) -> Iterator[None]:
        """Mark a backend write of this session's answers as in progress."""
        self._writes_in_flight += 1
        try:
            yield
        finally:
            self._writes_in_flight -= 1

    def accept(self, invitation_id: InvitationId) -> InvitationState:
        """Mark an invitation as accepted.

        Removes it from the declined set in the same step. Repeating the call
        leaves the state unchanged but is still acknowledged.

        Args:
            invitation_id: Invitation to accept

        Returns:
            New state
        """
        self._replace(self._state.with_accepted(invitation_id))
        send_notice(
            self.notifier,
            Notice(
                level=NoticeLevel.SUCCESS,
                title="Invitation accepted",
                description=invitation_id,
            ),
        )
        logfire.info("Accepted invitation", invitation_id=invitation_id)
        return self._state

    def decline(self, invitation_id: InvitationId) -> InvitationState:
        """Mark an invitation as declined.

        Removes it from the accepted set in the same step.

        Args:
            invitation_id: Invitation to decline

        Returns:
            New state
        """
        self._replace(self._state.with_declined(invitation_id))
        send_notice(
            self.notifier,
            Notice(
                level=NoticeLevel.SUCCESS,
                title="Invitation declined",
                description=invitation_id,
            ),
        )
        logfire.info("Declined invitation", invitation_id=invitation_id)
        return self._state

    def restore(self, state: InvitationState) -> InvitationState:
        """Replace the whole state with one derived from the backend.

        Args:
            state: Authoritative state

        Returns:
            New state
        """
        self._replace(state)
        logfire.info(
            "Invitation state restored",
            accepted=len(state.accepted),
            declined=len(state.declined),
        )
        return self._state

    def subscribe(self, callback: Callable[[InvitationState], None]) -> Unsubscribe:
        """Watch the state.

        Args:
            callback: Called with the new state after every change

        Returns:
            Function that stops the subscription
        """
        return self._subscribers.subscribe(_STATE_KEY, callback)

    def _replace(self, state: InvitationState) -> None:
        # Single assignment: observers never see a half-applied transition
        self._state = state
        self._version += 1
        self._subscribers.publish(_STATE_KEY, state)
