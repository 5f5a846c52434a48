"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class InsightsProviderError(ProviderError):
    """Insights edge function call failed."""

    pass
