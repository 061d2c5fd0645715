"""Capture files from disk as base64-encoded attachments."""

from __future__ import annotations

import base64
import logging
import mimetypes
import os
from pathlib import Path

from .composition_errors import (
    AttachmentNotFoundError,
    AttachmentReadError,
    AttachmentSizeLimitError,
)
from .message_parts import Attachment

MAX_ATTACHMENT_SIZE = 10_000_000
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Content types of compressed files, keyed by the encoding mimetypes reports.
_ENCODING_CONTENT_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "compress": "application/x-compress",
    "br": "application/x-brotli",
}

_LOGGER = logging.getLogger(__name__)


def read_attachment(file_path: Path | str, *, max_size: int = MAX_ATTACHMENT_SIZE) -> Attachment:
    """Read a file and return it as an attachment.

    The size is checked from file metadata before the file is opened, so
    oversized files are never read.

    Args:
      file_path: Path of the file to attach.
      max_size: Largest accepted file size in bytes.

    Returns:
      The captured attachment.

    Raises:
      AttachmentNotFoundError: If the path cannot be stat'd.
      AttachmentSizeLimitError: If the file is larger than ``max_size``.
      AttachmentReadError: If the file cannot be opened or read.
    """
    path = Path(file_path)
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise AttachmentNotFoundError(path, f"Attachment file not found: {path}") from exc
    if size > max_size:
        raise AttachmentSizeLimitError(path, size, max_size)

    try:
        with path.open("rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise AttachmentReadError(path, f"Failed to read attachment {path}: {exc}") from exc

    attachment = Attachment(
        name=_display_name(path),
        content=base64.b64encode(data).decode("ascii"),
        content_type=_content_type(path),
    )
    _LOGGER.debug(
        "captured attachment %s (%d bytes, %s)", attachment.name, size, attachment.content_type
    )
    return attachment


def _display_name(path: Path) -> str:
    # Undecodable bytes in the file name become U+FFFD so the payload stays valid UTF-8.
    return os.fsencode(path.name).decode("utf-8", "replace")


def _content_type(path: Path) -> str:
    content_type, encoding = mimetypes.guess_type(path.name)
    if encoding:
        return _ENCODING_CONTENT_TYPES.get(encoding, DEFAULT_CONTENT_TYPE)
    return content_type or DEFAULT_CONTENT_TYPE
