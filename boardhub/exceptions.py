"""Domain errors raised by the BoardHub stores."""


class BoardHubError(Exception):
    """Base class for store errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(BoardHubError):
    """Raised when a referenced entity or scoping id does not exist."""
    pass


class ConflictError(BoardHubError):
    """Raised when a write would violate a uniqueness constraint."""
    pass


class ValidationError(BoardHubError):
    """Raised when store input is missing a required field or has a bad value."""
    pass
