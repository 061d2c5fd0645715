"""Client library for sending transactional email through the Postmark API."""

import logging

from .delivery import (
    POSTMARK_API_URL,
    ApiTransport,
    AuthError,
    HTTPStatusError,
    MalformedRequestError,
    NotFoundError,
    RemoteError,
    Reply,
    ServerError,
    TransportError,
)
from .errors import PostmarkMailError
from .message_composition import (
    MAX_ATTACHMENT_SIZE,
    Attachment,
    AttachmentError,
    AttachmentNotFoundError,
    AttachmentReadError,
    AttachmentSizeLimitError,
    CustomHeader,
    MailMessage,
    MessageValidationError,
    MissingBodyError,
    MissingRecipientError,
    MissingSenderError,
    MissingSubjectError,
    create_message,
)
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "POSTMARK_API_URL",
    "MAX_ATTACHMENT_SIZE",
    "PostmarkMailError",
    "MailMessage",
    "create_message",
    "CustomHeader",
    "Attachment",
    "Reply",
    "ApiTransport",
    "MessageValidationError",
    "MissingSenderError",
    "MissingRecipientError",
    "MissingSubjectError",
    "MissingBodyError",
    "AttachmentError",
    "AttachmentNotFoundError",
    "AttachmentReadError",
    "AttachmentSizeLimitError",
    "TransportError",
    "HTTPStatusError",
    "AuthError",
    "NotFoundError",
    "MalformedRequestError",
    "ServerError",
    "RemoteError",
]
