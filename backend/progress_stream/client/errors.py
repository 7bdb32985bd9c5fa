"""Consumer-side exceptions."""


class StreamError(Exception):
    """Base class for consumer failures."""


class ConfigurationError(StreamError):
    """Endpoint URL is missing or malformed. Raised before any network activity."""

    def __init__(self, detail: str, reason: str):
        super().__init__(detail)
        self.detail = detail
        self.reason = reason  # short form shown in the status line


class TransportError(StreamError):
    """Non-success status, connection failure or mid-stream read failure."""


class InvalidTransition(StreamError):
    """A controller action was requested from a state that does not allow it."""
