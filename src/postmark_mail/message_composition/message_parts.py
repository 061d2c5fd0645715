"""Value objects embedded in an outgoing message."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomHeader:
    """Caller-supplied header, sent as an HTTP header and inside the payload."""

    name: str
    value: str

    def to_payload(self) -> dict[str, str]:
        return {"Name": self.name, "Value": self.value}


@dataclass(frozen=True)
class Attachment:
    """File snapshot captured at attach time."""

    name: str
    content: str
    content_type: str

    def to_payload(self) -> dict[str, str]:
        return {"Name": self.name, "Content": self.content, "ContentType": self.content_type}
