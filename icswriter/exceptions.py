"""Exceptions for icswriter library."""


class CalendarError(Exception):
    """Base exception for all icswriter errors."""


class CalendarEncodeError(CalendarError):
    """Exception raised when a component tree can't be encoded.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the underlying validation errors or
    the component being written, useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarEncodeError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class CalendarWriteError(CalendarEncodeError):
    """Exception raised when the output stream fails.

    Once a write has failed the stream may contain a partial content line, so
    the encoder that raised this will refuse any further writes.
    """
