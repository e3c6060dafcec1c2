"""Errors raised by the API client.

Nothing is retried: every error goes back to the caller, which decides
whether to show it and call again.
"""


class NetworkError(Exception):
    """Base class; ``message`` is suitable for showing to the user."""

    message = "Network error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidURLError(NetworkError):
    message = "Invalid URL"


class NoDataError(NetworkError):
    message = "No data received from server"


class DecodingError(NetworkError):
    message = "Failed to decode server response"


class ServerError(NetworkError):
    """The server rejected the request; carries its ``error`` text when it sent one."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class UnauthorizedError(NetworkError):
    """401: the session is invalid or expired and has already been cleared."""

    message = "Session expired. Please login again."
