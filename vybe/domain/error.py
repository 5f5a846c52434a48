"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class FetchFailedError(DomainError):
    """Raised when the insights provider call rejected or timed out.

    Only the classification is exposed to callers; provider detail stays in
    the logs.
    """

    def __init__(self, user_id: str, reason: str):
        self.user_id = user_id
        self.reason = reason
        super().__init__(f"Insights fetch failed for {user_id}")


class InvitationPersistenceError(DomainError):
    """Raised when an invitation response could not be written to the backend."""

    def __init__(self, invitation_id: str, reason: str):
        self.invitation_id = invitation_id
        self.reason = reason
        super().__init__(f"Could not persist response for invitation {invitation_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
