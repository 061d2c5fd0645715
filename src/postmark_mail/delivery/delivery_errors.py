"""Errors raised while delivering a message to the API."""

from __future__ import annotations

from postmark_mail.errors import PostmarkMailError

from .delivery_outcomes import Reply


class TransportError(PostmarkMailError):
    """Raised when the API endpoint cannot be reached; the cause is chained."""


class HTTPStatusError(PostmarkMailError):
    """Raised for HTTP statuses that the API documents as request failures."""

    description = "HTTP error"

    def __init__(self, status_code: int) -> None:
        super().__init__(f"[Postmark] HTTP error {status_code} : {self.description}")
        self.status_code = status_code


class AuthError(HTTPStatusError):
    description = "Missing or invalid server token"


class NotFoundError(HTTPStatusError):
    description = "Page not found"


class MalformedRequestError(HTTPStatusError):
    description = "Unprocessable request JSON"


class ServerError(HTTPStatusError):
    description = "Server error"


class RemoteError(PostmarkMailError):
    """Raised when the API accepted the request but reported an error code."""

    def __init__(self, reply: Reply) -> None:
        detail = f": {reply.message}" if reply.message else ""
        super().__init__(f"Error Code: {reply.error_code}{detail}")
        self.reply = reply

    @property
    def error_code(self) -> int:
        return self.reply.error_code
