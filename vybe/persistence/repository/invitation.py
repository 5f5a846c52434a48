"""PostgreSQL implementation of the invitation response repository."""

from datetime import datetime, timezone

import logfire
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vybe.domain.error import InvitationPersistenceError, NotFoundError
from vybe.domain.repository import InvitationResponseRepository
from vybe.domain.value import InvitationId, InvitationStatus, UserId
from vybe.persistence.tables import date_invitations_table

_ANSWERED = (InvitationStatus.ACCEPTED.value, InvitationStatus.DECLINED.value)


class PostgresInvitationResponseRepository(InvitationResponseRepository):
    """PostgreSQL implementation of InvitationResponseRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save_response(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> None:
        """Update the invitation's status column.

        Args:
            invitation_id: Invitation being answered
            status: ACCEPTED or DECLINED

        Raises:
            NotFoundError: If no invitation has this ID
            InvitationPersistenceError: If the database rejected the write
        """
        stmt = (
            update(date_invitations_table)
            .where(date_invitations_table.c.id == invitation_id)
            .values(status=status.value, updated_at=datetime.now(timezone.utc))
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            # Leave the session usable for the commit at the end of the scope
            await self.session.rollback()
            logfire.warn(
                "Invitation update failed",
                invitation_id=invitation_id,
                error=str(e),
            )
            raise InvitationPersistenceError(invitation_id, str(e))

        if result.rowcount == 0:
            raise NotFoundError("Invitation", invitation_id)

    async def find_responses(
        self, recipient_id: UserId
    ) -> dict[InvitationId, InvitationStatus]:
        """Load answered invitations addressed to a user.

        Args:
            recipient_id: Invitation recipient

        Returns:
            Status per invitation ID
        """
        stmt = select(
            date_invitations_table.c.id, date_invitations_table.c.status
        ).where(
            date_invitations_table.c.recipient_id == recipient_id,
            date_invitations_table.c.status.in_(_ANSWERED),
        )
        result = await self.session.execute(stmt)
        return {
            InvitationId(str(row.id)): InvitationStatus(row.status)
            for row in result.all()
        }
