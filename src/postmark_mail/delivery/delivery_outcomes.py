"""Reply returned by the API after a send attempt."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    """Acknowledgment of one send attempt; ``error_code`` 0 means success."""

    error_code: int = 0
    message: str = ""
    message_id: str = ""
    submitted_at: str = ""
    to: str = ""

    @property
    def succeeded(self) -> bool:
        return self.error_code == 0

    @staticmethod
    def from_body(body: bytes | str) -> Reply:
        """Decode a response body without ever failing.

        Keys match case-insensitively. A value of the wrong JSON type leaves
        that field at its default; an undecodable body yields an empty reply.
        """
        try:
            parsed = json.loads(body, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            _LOGGER.warning("ignoring undecodable reply body (%d bytes)", len(body))
            return Reply()
        if not isinstance(parsed, Mapping):
            _LOGGER.warning("ignoring reply body that is not a JSON object")
            return Reply()
        return Reply.from_mapping(parsed)

    @staticmethod
    def from_mapping(values: Mapping[str, Any]) -> Reply:
        lowered = {str(key).lower(): value for key, value in values.items()}
        return Reply(
            error_code=_int_field(lowered, "errorcode"),
            message=_str_field(lowered, "message"),
            message_id=_str_field(lowered, "messageid"),
            submitted_at=_str_field(lowered, "submittedat"),
            to=_str_field(lowered, "to"),
        )


def _int_field(values: Mapping[str, Any], key: str) -> int:
    value = values.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is not None:
        _LOGGER.warning("reply field %s has unexpected type %s", key, type(value).__name__)
    return 0


def _str_field(values: Mapping[str, Any], key: str) -> str:
    value = values.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        _LOGGER.warning("reply field %s has unexpected type %s", key, type(value).__name__)
    return ""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")
