class RemoteQueryError(Exception):
    """Base class for failures of the remote query API call."""

    category = "transport"


class RemoteTimeoutError(RemoteQueryError):
    """Raised when the call does not settle within the configured timeout."""

    category = "timeout"


class RemoteTransportError(RemoteQueryError):
    """Raised when the API cannot be reached."""

    category = "transport"


class RemoteStatusError(RemoteQueryError):
    """Raised for a non-success HTTP status."""

    category = "status"

    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"API request failed: {status_code} {reason}".strip())
        self.status_code = status_code


class RemoteResponseError(RemoteQueryError):
    """Raised when the response body is not a valid answer set."""

    category = "parse"
