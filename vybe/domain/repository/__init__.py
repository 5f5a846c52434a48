"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from vybe.domain.repository.invitation import InvitationResponseRepository

__all__ = [
    "InvitationResponseRepository",
]
