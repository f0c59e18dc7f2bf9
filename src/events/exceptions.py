class DiscoveryError(Exception):
    """Base class for errors raised by the event discovery engine."""


class RankingValidationError(DiscoveryError):
    """Raised when a ranking request is missing fields or carries unusable values.

    Client fault; retrying without fixing the request will fail again.
    """

    def __init__(self, message: str = "Missing required parameters", missing_fields: list[str] | None = None) -> None:
        """Initialize the exception with the offending field names."""
        super().__init__(message)
        self.message = message
        self.missing_fields = missing_fields or []


class StoreError(DiscoveryError):
    """Raised when reading from the event store fails.

    The whole page request is aborted; re-issuing the same request is safe.
    """


class InvalidInputError(DiscoveryError, ValueError):
    """Raised when an age band is requested for a non-positive average age."""
