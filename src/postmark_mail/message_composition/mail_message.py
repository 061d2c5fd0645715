"""Outgoing message composition and sending."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from postmark_mail.delivery.api_transport import ApiTransport
from postmark_mail.delivery.delivery_outcomes import Reply
from postmark_mail.version import __version__

from .attachment_reader import read_attachment
from .composition_errors import (
    MissingBodyError,
    MissingRecipientError,
    MissingSenderError,
    MissingSubjectError,
)
from .message_parts import Attachment, CustomHeader

USER_AGENT = f"Python (postmark_mail library version {__version__})"

_LOGGER = logging.getLogger(__name__)

# Optional payload keys, included only when the attribute is a non-empty string.
_OPTIONAL_FIELDS = (
    ("ReplyTo", "reply_to"),
    ("Cc", "cc"),
    ("Bcc", "bcc"),
    ("Tag", "tag"),
    ("HtmlBody", "html_body"),
    ("TextBody", "text_body"),
)


class MailMessage:  # pylint: disable=too-many-instance-attributes
    """One outgoing email bound to a Postmark server token.

    Envelope and body fields are plain attributes that start empty. Address
    fields hold a single string that may list several comma-separated
    addresses; they are passed through untouched.
    """

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key
        self._custom_headers: list[CustomHeader] = []
        self._attachments: list[Attachment] = []

        self.sender = ""
        self.reply_to = ""
        self.to = ""
        self.cc = ""
        self.bcc = ""
        self.subject = ""
        self.tag = ""
        self.html_body = ""
        self.text_body = ""

    def __repr__(self) -> str:
        return (
            f"MailMessage(sender={self.sender!r}, to={self.to!r}, subject={self.subject!r}, "
            f"attachments={len(self._attachments)}, headers={len(self._custom_headers)})"
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def user_agent(self) -> str:
        return USER_AGENT

    @property
    def custom_headers(self) -> tuple[CustomHeader, ...]:
        return tuple(self._custom_headers)

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        return tuple(self._attachments)

    def add_custom_header(self, name: str, value: str) -> CustomHeader:
        """Append a header; repeated names are kept as separate entries."""
        header = CustomHeader(name=name, value=value)
        self._custom_headers.append(header)
        return header

    def add_attachment(self, file_path: Path | str) -> Attachment:
        """Capture a file as an attachment.

        Raises:
          AttachmentError: If the file is missing, unreadable or too large.
            Nothing is appended in that case.
        """
        attachment = read_attachment(file_path)
        self._attachments.append(attachment)
        return attachment

    def validate(self) -> None:
        """Raise the first missing-field error, checking sender, recipient, subject, body."""
        if not self.sender:
            raise MissingSenderError()
        if not self.to:
            raise MissingRecipientError()
        if not self.subject:
            raise MissingSubjectError()
        if not self.html_body and not self.text_body:
            raise MissingBodyError()

    def payload_fields(self) -> dict[str, Any]:
        """Return the API request object for this message."""
        self.validate()
        fields: dict[str, Any] = {
            "From": self.sender,
            "To": self.to,
            "Subject": self.subject,
        }
        for key, attribute in _OPTIONAL_FIELDS:
            value = getattr(self, attribute)
            if value:
                fields[key] = value
        if self._attachments:
            fields["Attachments"] = [attachment.to_payload() for attachment in self._attachments]
        if self._custom_headers:
            fields["Headers"] = [header.to_payload() for header in self._custom_headers]
        return fields

    def build_payload(self) -> bytes:
        """Return the JSON request body. Calling it has no side effects."""
        return json.dumps(self.payload_fields(), ensure_ascii=False).encode("utf-8")

    def send(self, transport: ApiTransport | None = None) -> Reply:
        """Send the message with one HTTP request.

        Args:
          transport: Transport to use; a default one is created and closed
            around this call when omitted.

        Returns:
          The decoded reply of the API.

        Raises:
          MessageValidationError: Before any I/O, if a required field is missing.
          TransportError: If the endpoint cannot be reached.
          HTTPStatusError: For the mapped 401/404/422/500 statuses.
          RemoteError: If the reply reports a non-zero error code; the reply is
            available on the exception.
        """
        payload = self.build_payload()
        _LOGGER.debug("sending message %r", self)
        if transport is not None:
            return self._deliver(transport, payload)
        with ApiTransport() as default_transport:
            return self._deliver(default_transport, payload)

    def _deliver(self, transport: ApiTransport, payload: bytes) -> Reply:
        return transport.deliver(
            payload,
            api_key=self._api_key,
            user_agent=self.user_agent,
            custom_headers=self._custom_headers,
        )


def create_message(api_key: str) -> MailMessage:
    """Create an empty message bound to ``api_key``."""
    return MailMessage(api_key)
