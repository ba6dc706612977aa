"""Domain-specific exceptions."""

SEARCH_FAILED_MESSAGE = "Failed to search members. Please try again."


class ServiceError(Exception):
    pass


class InvalidQuery(ServiceError):
    """Raised when the search text is empty after trimming."""


class SearchFailed(ServiceError):
    """Directory lookup failed; the message is safe to show to end users."""

    def __init__(self, message: str = SEARCH_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
