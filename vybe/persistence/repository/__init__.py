"""PostgreSQL repository implementations."""

from vybe.persistence.repository.invitation import (
    PostgresInvitationResponseRepository,
)

__all__ = [
    "PostgresInvitationResponseRepository",
]
