"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the client-side state that sits between the UI and
    the backend, and the rules for changing it.
    """

    pass
