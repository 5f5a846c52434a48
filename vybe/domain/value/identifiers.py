"""Strongly typed identifiers.

Identifiers are issued by the backend and treated as opaque strings here.
"""

from typing import NewType

UserId = NewType("UserId", str)
InvitationId = NewType("InvitationId", str)
