"""HTTP exchange with the Postmark email endpoint."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any, Protocol

import requests
from requests.structures import CaseInsensitiveDict

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

POSTMARK_API_URL = "https://api.postmarkapp.com/email"
SERVER_TOKEN_HEADER = "X-Postmark-Server-Token"

_STATUS_ERRORS: dict[int, type[HTTPStatusError]] = {
    401: AuthError,
    404: NotFoundError,
    422: MalformedRequestError,
    500: ServerError,
}

_LOGGER = logging.getLogger(__name__)


class _HTTPResponse(Protocol):
    """Subset of the response API required by the transport."""

    status_code: int
    content: bytes


class HTTPSession(Protocol):
    """Protocol implemented by ``requests.Session`` and test fakes."""

    def post(
        self, url: str, *, data: bytes, headers: Any, timeout: float | None
    ) -> _HTTPResponse: ...

    def close(self) -> None: ...


class _HeaderLike(Protocol):  # pylint: disable=too-few-public-methods
    name: str
    value: str


class ApiTransport:
    """Posts JSON payloads to the API and interprets the response."""

    def __init__(
        self,
        session: HTTPSession | None = None,
        *,
        endpoint: str = POSTMARK_API_URL,
        timeout_seconds: float | None = None,
    ) -> None:
        self._owns_session = session is None
        self._session: HTTPSession = session if session is not None else requests.Session()
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __enter__(self) -> ApiTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._owns_session:
            self._session.close()

    def deliver(
        self,
        payload: bytes,
        *,
        api_key: str,
        user_agent: str,
        custom_headers: Iterable[_HeaderLike] = (),
    ) -> Reply:
        """Post ``payload`` once and return the decoded reply.

        Custom headers are applied after the standard ones, in order, so a
        custom header replaces a standard or earlier header of the same name.
        """
        headers = build_request_headers(
            api_key=api_key, user_agent=user_agent, custom_headers=custom_headers
        )
        try:
            response = self._session.post(
                self._endpoint, data=payload, headers=headers, timeout=self._timeout_seconds
            )
        except requests.RequestException as exc:
            raise TransportError(f"Failed to reach {self._endpoint}: {exc}") from exc

        _LOGGER.debug("%s responded with HTTP %d", self._endpoint, response.status_code)
        error_cls = _STATUS_ERRORS.get(response.status_code)
        if error_cls is not None:
            raise error_cls(response.status_code)

        reply = Reply.from_body(response.content)
        if reply.error_code != 0:
            raise RemoteError(reply)
        return reply


def build_request_headers(
    *, api_key: str, user_agent: str, custom_headers: Iterable[_HeaderLike] = ()
) -> CaseInsensitiveDict[str]:
    headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
    headers["Accept"] = "application/json"
    headers["Content-Type"] = "application/json"
    headers["User-Agent"] = user_agent
    headers[SERVER_TOKEN_HEADER] = api_key
    for header in custom_headers:
        headers[header.name] = header.value
    return headers
