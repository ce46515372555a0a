class DateKitError(Exception):
    """Base exception for all datekit errors."""


class InvalidTimeValueError(DateKitError, ValueError):
    """An operation that needs a real point in time received an invalid date."""

    def __init__(self, message: str = "Invalid time value") -> None:
        super().__init__(message)
