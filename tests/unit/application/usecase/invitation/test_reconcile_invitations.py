"""Unit tests for ReconcileInvitationsUseCase."""

import asyncio

import pytest

from vybe.application.usecase.invitation import (
    AcceptInvitationUseCase,
    ReconcileInvitationsRequest,
    ReconcileInvitationsUseCase,
    RespondToInvitationRequest,
)
from vybe.domain.repository import InvitationResponseRepository
from vybe.domain.service import InvitationStateTracker
from vybe.domain.value import InvitationStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReconcileInvitationsUseCase:
    """Tests for ReconcileInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_restores_state_from_backend(self, unit_env):
        """A fresh session should pick up earlier answers."""
        # Arrange
        repo = await unit_env.get(InvitationResponseRepository)
        repo.add_invitation("inv-a", "u1", InvitationStatus.ACCEPTED)
        repo.add_invitation("inv-b", "u1", InvitationStatus.DECLINED)
        repo.add_invitation("inv-c", "u1")
        repo.add_invitation("inv-d", "u2", InvitationStatus.ACCEPTED)
        tracker = await unit_env.get(InvitationStateTracker)
        use_case = await unit_env.get(ReconcileInvitationsUseCase)

        # Act
        response = await use_case.execute(
            ReconcileInvitationsRequest(recipient_id="u1")
        )

        # Assert
        assert response.changed is True
        assert response.accepted == ["inv-a"]
        assert response.declined == ["inv-b"]
        assert tracker.state.accepted == {"inv-a"}
        assert tracker.state.status_of("inv-c") == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_no_change_when_in_sync(self, unit_env):
        """Persisted answers should leave the tracker untouched."""
        repo = await unit_env.get(InvitationResponseRepository)
        repo.add_invitation("inv-a", "u1")
        accept = await unit_env.get(AcceptInvitationUseCase)
        await accept.execute(RespondToInvitationRequest(invitation_id="inv-a"))
        use_case = await unit_env.get(ReconcileInvitationsUseCase)

        response = await use_case.execute(
            ReconcileInvitationsRequest(recipient_id="u1")
        )

        assert response.changed is False
        assert response.accepted == ["inv-a"]

    @pytest.mark.asyncio
    async def test_backend_wins_after_failed_write(self, unit_env):
        """Drift from a failed write is undone by reconciliation."""
        repo = await unit_env.get(InvitationResponseRepository)
        repo.add_invitation("inv-a", "u1")
        repo.fail_writes = True
        tracker = await unit_env.get(InvitationStateTracker)
        accept = await unit_env.get(AcceptInvitationUseCase)
        await accept.execute(RespondToInvitationRequest(invitation_id="inv-a"))
        use_case = await unit_env.get(ReconcileInvitationsUseCase)

        response = await use_case.execute(
            ReconcileInvitationsRequest(recipient_id="u1")
        )

        assert response.changed is True
        assert response.accepted == []
        assert tracker.state.status_of("inv-a") == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_answer_given_during_read_is_kept(self, unit_env):
        """An accept that lands while the backend is read must survive."""
        # Arrange
        repo = await unit_env.get(InvitationResponseRepository)
        repo.add_invitation("inv-a", "u1")
        tracker = await unit_env.get(InvitationStateTracker)
        accept = await unit_env.get(AcceptInvitationUseCase)
        use_case = await unit_env.get(ReconcileInvitationsUseCase)

        read_taken = asyncio.Event()
        resume_read = asyncio.Event()
        find_responses = repo.find_responses
        reads = []

        async def paused_find_responses(recipient_id):
            result = await find_responses(recipient_id)
            reads.append(result)
            if len(reads) == 1:
                read_taken.set()
                await resume_read.wait()
            return result

        repo.find_responses = paused_find_responses

        # Act
        reconciling = asyncio.create_task(
            use_case.execute(ReconcileInvitationsRequest(recipient_id="u1"))
        )
        await read_taken.wait()
        accepted = await accept.execute(
            RespondToInvitationRequest(invitation_id="inv-a")
        )
        resume_read.set()
        response = await reconciling

        # Assert
        assert accepted.persisted is True
        assert repo.status_of("inv-a") == InvitationStatus.ACCEPTED
        assert tracker.state.status_of("inv-a") == InvitationStatus.ACCEPTED
        assert response.applied is True
        assert response.accepted == ["inv-a"]
        assert len(reads) == 2

    @pytest.mark.asyncio
    async def test_answer_still_being_written_is_kept(self, unit_env):
        """Reconciliation must not undo an answer whose write is pending."""
        repo = await unit_env.get(InvitationResponseRepository)
        repo.add_invitation("inv-a", "u1")
        tracker = await unit_env.get(InvitationStateTracker)
        accept = await unit_env.get(AcceptInvitationUseCase)
        use_case = await unit_env.get(ReconcileInvitationsUseCase)

        write_started = asyncio.Event()
        finish_write = asyncio.Event()
        save_response = repo.save_response

        async def slow_save_response(invitation_id, status):
            write_started.set()
            await finish_write.wait()
            await save_response(invitation_id, status)

        repo.save_response = slow_save_response

        accepting = asyncio.create_task(
            accept.execute(RespondToInvitationRequest(invitation_id="inv-a"))
        )
        await write_started.wait()

        during = await use_case.execute(
            ReconcileInvitationsRequest(recipient_id="u1")
        )

        assert during.applied is False
        assert during.accepted == ["inv-a"]
        assert tracker.state.status_of("inv-a") == InvitationStatus.ACCEPTED

        finish_write.set()
        await accepting
        after = await use_case.execute(ReconcileInvitationsRequest(recipient_id="u1"))

        assert after.applied is True
        assert after.changed is False
        assert tracker.state.status_of("inv-a") == InvitationStatus.ACCEPTED
