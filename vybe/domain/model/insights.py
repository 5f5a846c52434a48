"""Insights cache entities.

The insights payload is computed by the analytics provider and is opaque to
the cache: it is stored, timestamped and replaced as a whole.
"""

from datetime import datetime
from typing import Any

from vybe.domain.model.common import DomainModel
from vybe.domain.value import IdentityStatus, InsightsState, UserId

# Opaque to the cache; the provider defines the shape
InsightsPayload = Any


class InsightsRecord(DomainModel):
    """Cached insights for one user.

    A record is never mutated; every transition stores a new record.

    Attributes:
        key: User the record was fetched for
        value: Last successfully fetched payload, None if never fetched
        fetched_at: Time of the last successful fetch
        state: Lifecycle state
        last_error: Reason of the last failure, cleared on success
    """

    key: UserId
    value: InsightsPayload = None
    fetched_at: datetime | None = None
    state: InsightsState = InsightsState.IDLE
    last_error: str | None = None


class InsightsView(DomainModel):
    """What a caller sees when reading the cache."""

    user_id: UserId | None = None
    value: InsightsPayload = None
    state: InsightsState = InsightsState.IDLE
    error: str | None = None  # Generic classification only
    is_fetching: bool = False
    fetched_at: datetime | None = None
    identity_status: IdentityStatus = IdentityStatus.AUTHENTICATED

    @property
    def loading(self) -> bool:
        """True while the first fetch (or a forced refresh) is pending."""
        return self.state == InsightsState.LOADING
