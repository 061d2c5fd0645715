"""Message composition exports."""

from .attachment_reader import MAX_ATTACHMENT_SIZE, read_attachment
from .composition_errors import (
    AttachmentError,
    AttachmentNotFoundError,
    AttachmentReadError,
    AttachmentSizeLimitError,
    MessageValidationError,
    MissingBodyError,
    MissingRecipientError,
    MissingSenderError,
    MissingSubjectError,
)
from .mail_message import MailMessage, create_message
from .message_parts import Attachment, CustomHeader

__all__ = [
    "MAX_ATTACHMENT_SIZE",
    "read_attachment",
    "Attachment",
    "CustomHeader",
    "MailMessage",
    "create_message",
    "MessageValidationError",
    "MissingSenderError",
    "MissingRecipientError",
    "MissingSubjectError",
    "MissingBodyError",
    "AttachmentError",
    "AttachmentNotFoundError",
    "AttachmentReadError",
    "AttachmentSizeLimitError",
]
