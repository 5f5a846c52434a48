"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import model_validator

from vybe.domain.value.common import ValueObject
from vybe.domain.value.identifiers import UserId


class IdentityStatus(str, Enum):
    """Readiness of the externally supplied identity."""

    LOADING = "loading"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class InsightsState(str, Enum):
    """Lifecycle state of a cached insights record."""

    IDLE = "idle"
    LOADING = "loading"
    FRESH = "fresh"
    STALE = "stale"
    ERRORED = "errored"


class InvitationStatus(str, Enum):
    """Status of a date invitation as stored by the backend."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CANCELLED = "cancelled"


class NoticeLevel(str, Enum):
    """Severity of a user-visible notice."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Identity(ValueObject):
    """Current user identity as reported by the identity provider.

    ``user_id`` is only present once the provider has confirmed a signed-in
    user. Loading and anonymous identities never trigger fetches.
    """

    status: IdentityStatus
    user_id: UserId | None = None

    @model_validator(mode="after")
    def check_user_id_matches_status(self) -> "Identity":
        """Require a user ID exactly when authenticated."""
        if self.status == IdentityStatus.AUTHENTICATED and not self.user_id:
            raise ValueError("Authenticated identity requires a user_id")
        if self.status != IdentityStatus.AUTHENTICATED and self.user_id is not None:
            raise ValueError(f"{self.status.value} identity cannot carry a user_id")
        return self

    @classmethod
    def loading(cls) -> "Identity":
        return cls(status=IdentityStatus.LOADING)

    @classmethod
    def anonymous(cls) -> "Identity":
        return cls(status=IdentityStatus.ANONYMOUS)

    @classmethod
    def authenticated(cls, user_id: str) -> "Identity":
        return cls(status=IdentityStatus.AUTHENTICATED, user_id=UserId(user_id))


class Notice(ValueObject):
    """Fire-and-forget message for user-visible feedback."""

    level: NoticeLevel
    title: str
    description: str | None = None
