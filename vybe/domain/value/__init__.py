"""Domain value objects."""

from vybe.domain.value.identifiers import InvitationId, UserId
from vybe.domain.value.types import (
    Identity,
    IdentityStatus,
    InsightsState,
    InvitationStatus,
    Notice,
    NoticeLevel,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    # Types
    "Identity",
    "IdentityStatus",
    "InsightsState",
    "InvitationStatus",
    "Notice",
    "NoticeLevel",
]
