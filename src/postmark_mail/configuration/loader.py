"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from postmark_mail.delivery.api_transport import POSTMARK_API_URL
from postmark_mail.errors import PostmarkMailError

from .runtime_settings import ApiSettings, Configuration, MessageDefaults

_PLACEHOLDER = "<REQUIRED>"


class ConfigurationError(PostmarkMailError):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    api = _parse_api_section(parsed.get("api"))
    defaults = _parse_defaults_section(parsed.get("defaults"))
    return Configuration(path=path, api=api, defaults=defaults)


def _parse_api_section(value: Any) -> ApiSettings:
    section = _require_mapping(value, "api")
    server_token = _require_non_empty_string(section.get("server_token"), "api.server_token")
    if server_token == _PLACEHOLDER:
        raise ConfigurationError("api.server_token still holds the <REQUIRED> placeholder.")
    endpoint = _require_http_url(section.get("endpoint", POSTMARK_API_URL), "api.endpoint")
    timeout_raw = section.get("timeout_seconds")
    timeout_seconds = (
        None if timeout_raw is None else _require_positive_int(timeout_raw, "api.timeout_seconds")
    )
    return ApiSettings(
        server_token=server_token, endpoint=endpoint, timeout_seconds=timeout_seconds
    )


def _parse_defaults_section(value: Any) -> MessageDefaults:
    if value is None:
        return MessageDefaults()
    section = _require_mapping(value, "defaults")
    return MessageDefaults(
        sender=_optional_string(section.get("sender"), "defaults.sender"),
        reply_to=_optional_string(section.get("reply_to"), "defaults.reply_to"),
        tag=_optional_string(section.get("tag"), "defaults.tag"),
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_http_url(value: Any, field_name: str) -> str:
    url = _require_non_empty_string(value, field_name)
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{field_name} must be an http(s) URL.")
    return url


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
