"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationResponseRepository

__all__ = [
    "InMemoryInvitationResponseRepository",
]
