"""Ordering API exceptions."""


class BackendError(Exception):
    """Base exception for failures talking to the ordering API."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BackendConnectionError(BackendError):
    """The API could not be reached (DNS, refused connection, timeout)."""


class BackendAPIError(BackendError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        # Message supplied by the server, if it sent one
        self.detail = detail


class BackendAuthError(BackendAPIError):
    """The API refused the login credentials."""


class BackendResponseError(BackendError):
    """The API answered successfully but with a payload we cannot parse."""
