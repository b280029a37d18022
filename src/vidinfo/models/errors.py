"""Error hierarchy."""


class VidinfoError(Exception):
    """Root of the exceptions raised while collecting or validating a session."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class UnsupportedFormatError(VidinfoError):
    """Video format is not in the supported set."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="validation", details=details)


class InputError(VidinfoError):
    """Errors while reading interactive input."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="input", details=details)


class InputClosedError(InputError):
    """Input stream ended before a field was supplied."""


class RetryLimitExceededError(InputError):
    """A numeric field was rejected more times than allowed."""
