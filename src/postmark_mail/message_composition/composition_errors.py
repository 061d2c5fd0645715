"""Errors raised while composing a message, before any network I/O."""

from __future__ import annotations

from pathlib import Path

from postmark_mail.errors import PostmarkMailError


class MessageValidationError(PostmarkMailError):
    """Raised when a required message field is missing."""


class MissingSenderError(MessageValidationError):
    def __init__(self) -> None:
        super().__init__("Cannot send e-mail without a sender (sender field).")


class MissingRecipientError(MessageValidationError):
    def __init__(self) -> None:
        super().__init__("Cannot send e-mail without a recipient (to field).")


class MissingSubjectError(MessageValidationError):
    def __init__(self) -> None:
        super().__init__("Cannot send e-mail without a subject (subject field).")


class MissingBodyError(MessageValidationError):
    def __init__(self) -> None:
        super().__init__("Cannot send e-mail without an HTML body, a text body or both.")


class AttachmentError(PostmarkMailError):
    """Raised when a file cannot be captured as an attachment."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path


class AttachmentNotFoundError(AttachmentError):
    """The attachment path does not exist or cannot be inspected."""


class AttachmentReadError(AttachmentError):
    """The attachment file exists but could not be opened or read."""


class AttachmentSizeLimitError(AttachmentError):
    """The attachment file is larger than the API accepts."""

    def __init__(self, path: Path, size: int, limit: int) -> None:
        super().__init__(path, f"File size {size} of {path} exceeds the {limit} byte limit.")
        self.size = size
        self.limit = limit
