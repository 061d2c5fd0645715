"""Delivery exports."""

from .api_transport import POSTMARK_API_URL, ApiTransport, HTTPSession
from .delivery_errors import (
    AuthError,
    HTTPStatusError,
    MalformedRequestError,
    NotFoundError,
    RemoteError,
    ServerError,
    TransportError,
)
from .delivery_outcomes import Reply

__all__ = [
    "POSTMARK_API_URL",
    "ApiTransport",
    "HTTPSession",
    "Reply",
    "TransportError",
    "HTTPStatusError",
    "AuthError",
    "NotFoundError",
    "MalformedRequestError",
    "ServerError",
    "RemoteError",
]
