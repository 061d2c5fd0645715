"""Message composition and payload tests."""

from __future__ import annotations

import base64
import json
import os
import sys
from pathlib import Path
from typing import Any

import pytest
from postmark_mail.delivery.api_transport import ApiTransport
from postmark_mail.message_composition import (
    MailMessage,
    MissingBodyError,
    MissingRecipientError,
    MissingSenderError,
    MissingSubjectError,
    create_message,
)
from postmark_mail.message_composition.composition_errors import AttachmentSizeLimitError
from postmark_mail.message_composition.mail_message import USER_AGENT


def _message(**overrides: str) -> MailMessage:
    message = create_message("server-token")
    fields = {
        "sender": "a@x.com",
        "to": "b@x.com",
        "subject": "Hi",
        "text_body": "Hello",
    }
    fields.update(overrides)
    for name, value in fields.items():
        setattr(message, name, value)
    return message


def _decoded(message: MailMessage) -> dict[str, Any]:
    return json.loads(message.build_payload())


class _RecordingSession:
    def __init__(self) -> None:
        self.calls = 0

    def post(self, url: str, *, data: bytes, headers: Any, timeout: float | None) -> Any:
        self.calls += 1
        raise AssertionError("no request expected")

    def close(self) -> None:
        pass


def test_new_message_starts_empty() -> None:
    message = create_message("token-1")

    assert message.api_key == "token-1"
    assert message.user_agent == USER_AGENT
    assert "0.1" in message.user_agent
    for attribute in ("sender", "reply_to", "to", "cc", "bcc", "subject", "tag"):
        assert getattr(message, attribute) == ""
    assert message.html_body == ""
    assert message.text_body == ""
    assert message.custom_headers == ()
    assert message.attachments == ()


def test_minimal_message_builds_required_keys_only() -> None:
    assert _decoded(_message()) == {
        "From": "a@x.com",
        "To": "b@x.com",
        "Subject": "Hi",
        "TextBody": "Hello",
    }


@pytest.mark.parametrize(
    ("attribute", "key"),
    [
        ("reply_to", "ReplyTo"),
        ("cc", "Cc"),
        ("bcc", "Bcc"),
        ("tag", "Tag"),
        ("html_body", "HtmlBody"),
    ],
)
def test_setting_optional_field_adds_exactly_its_key(attribute: str, key: str) -> None:
    baseline = set(_decoded(_message()))
    message = _message(**{attribute: "value"})

    payload = _decoded(message)

    assert set(payload) - baseline == {key}
    assert payload[key] == "value"


def test_html_only_message_omits_text_body() -> None:
    payload = _decoded(_message(text_body="", html_body="<b>Hi</b>"))

    assert payload["HtmlBody"] == "<b>Hi</b>"
    assert "TextBody" not in payload


def test_build_payload_is_repeatable() -> None:
    message = _message(cc="c@x.com", tag="welcome")
    message.add_custom_header("X-One", "1")

    assert message.build_payload() == message.build_payload()


def test_address_lists_are_passed_through_untouched() -> None:
    payload = _decoded(_message(to="b@x.com, Name <c@x.com>", bcc="not an address"))

    assert payload["To"] == "b@x.com, Name <c@x.com>"
    assert payload["Bcc"] == "not an address"


@pytest.mark.parametrize(
    ("overrides", "error_cls"),
    [
        ({"sender": ""}, MissingSenderError),
        ({"to": ""}, MissingRecipientError),
        ({"subject": ""}, MissingSubjectError),
        ({"text_body": "", "html_body": ""}, MissingBodyError),
    ],
)
def test_missing_required_field_fails_without_network(
    overrides: dict[str, str], error_cls: type[Exception]
) -> None:
    message = _message(**overrides)
    session = _RecordingSession()

    with pytest.raises(error_cls):
        message.build_payload()
    with pytest.raises(error_cls):
        message.send(ApiTransport(session=session))
    assert session.calls == 0


def test_validation_reports_first_missing_field() -> None:
    message = create_message("token")
    message.subject = "Only a subject"

    with pytest.raises(MissingSenderError):
        message.validate()

    message.sender = "a@x.com"
    with pytest.raises(MissingRecipientError):
        message.validate()

    message.to = "b@x.com"
    message.subject = ""
    with pytest.raises(MissingSubjectError):
        message.validate()

    message.subject = "Hi"
    with pytest.raises(MissingBodyError):
        message.validate()

    message.html_body = "<p>Hi</p>"
    message.validate()


def test_duplicate_custom_headers_are_kept_in_order() -> None:
    message = _message()
    message.add_custom_header("X-Dup", "first")
    message.add_custom_header("X-Other", "middle")
    message.add_custom_header("X-Dup", "second")

    assert _decoded(message)["Headers"] == [
        {"Name": "X-Dup", "Value": "first"},
        {"Name": "X-Other", "Value": "middle"},
        {"Name": "X-Dup", "Value": "second"},
    ]


def test_attachments_are_serialized_in_order(tmp_path: Path) -> None:
    first = tmp_path / "notes.txt"
    first.write_text("hello", encoding="utf-8")
    second = tmp_path / "blob.qqqunknown"
    second.write_bytes(b"\x00\x01\x02")
    message = _message()

    message.add_attachment(first)
    message.add_attachment(str(second))

    attachments = _decoded(message)["Attachments"]
    assert [item["Name"] for item in attachments] == ["notes.txt", "blob.qqqunknown"]
    assert base64.b64decode(attachments[0]["Content"]) == b"hello"
    assert attachments[0]["ContentType"].startswith("text/plain")
    assert attachments[1]["ContentType"] == "application/octet-stream"


def test_attachment_snapshot_ignores_later_file_changes(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_text("a,b\n", encoding="utf-8")
    message = _message()
    message.add_attachment(path)

    path.write_text("changed\n", encoding="utf-8")

    content = _decoded(message)["Attachments"][0]["Content"]
    assert base64.b64decode(content) == b"a,b\n"


def test_oversized_attachment_is_not_appended(tmp_path: Path) -> None:
    path = tmp_path / "huge.bin"
    with path.open("wb") as handle:
        handle.truncate(10_000_001)
    message = _message()

    with pytest.raises(AttachmentSizeLimitError):
        message.add_attachment(path)

    assert message.attachments == ()
    assert "Attachments" not in _decoded(message)


def test_non_ascii_fields_are_utf8_encoded() -> None:
    payload = _message(subject="Olá", text_body="Grüße").build_payload()

    assert "Olá".encode() in payload
    assert json.loads(payload)["TextBody"] == "Grüße"


@pytest.mark.skipif(sys.platform != "linux", reason="needs byte file names")
def test_undecodable_attachment_name_still_builds_payload(tmp_path: Path) -> None:
    path = Path(os.fsdecode(os.fsencode(tmp_path) + b"/r\xe9sum\xe9.txt"))
    path.write_bytes(b"cv")
    message = _message()
    message.add_attachment(path)

    payload = _decoded(message)

    assert payload["Attachments"][0]["Name"] == "r\ufffdsum\ufffd.txt"
