"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from postmark_mail.delivery.api_transport import POSTMARK_API_URL, ApiTransport


@dataclass(frozen=True)
class ApiSettings:
    """Postmark API connectivity configuration."""

    server_token: str = field(repr=False)
    endpoint: str = POSTMARK_API_URL
    timeout_seconds: int | None = None

    def create_transport(self) -> ApiTransport:
        return ApiTransport(endpoint=self.endpoint, timeout_seconds=self.timeout_seconds)


@dataclass(frozen=True)
class MessageDefaults:
    """Envelope values applied when the caller leaves them empty."""

    sender: str | None = None
    reply_to: str | None = None
    tag: str | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    api: ApiSettings
    defaults: MessageDefaults
