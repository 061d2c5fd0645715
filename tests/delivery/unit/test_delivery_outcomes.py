"""Reply decoding tests."""

from __future__ import annotations

import logging

import pytest
from postmark_mail.delivery.delivery_outcomes import Reply


def test_decodes_documented_fields() -> None:
    reply = Reply.from_body(
        b'{"ErrorCode": 0, "Message": "OK", "MessageID": "id-1",'
        b' "SubmittedAt": "2024-01-01T00:00:00Z", "To": "b@x.com"}'
    )

    assert reply == Reply(0, "OK", "id-1", "2024-01-01T00:00:00Z", "b@x.com")


def test_keys_match_case_insensitively() -> None:
    reply = Reply.from_body('{"errorcode": 406, "messageId": "id-2"}')

    assert reply.error_code == 406
    assert reply.message_id == "id-2"
    assert not reply.succeeded


def test_missing_and_unknown_fields_default_to_zero_values() -> None:
    reply = Reply.from_body(b'{"Unexpected": true}')

    assert reply == Reply()
    assert reply.succeeded


def test_wrongly_typed_field_keeps_default_while_others_decode() -> None:
    reply = Reply.from_body(b'{"ErrorCode": "300", "Message": "Invalid", "To": 5}')

    assert reply.error_code == 0
    assert reply.message == "Invalid"
    assert reply.to == ""


def test_boolean_error_code_is_not_treated_as_integer() -> None:
    assert Reply.from_body(b'{"ErrorCode": true}').error_code == 0


def test_malformed_body_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="postmark_mail"):
        reply = Reply.from_body(b"{not json")

    assert reply == Reply()
    assert "undecodable" in caplog.text


def test_deeply_nested_body_yields_empty_reply() -> None:
    assert Reply.from_body(b"[" * 100_000) == Reply()


def test_non_standard_constants_reject_the_whole_body() -> None:
    reply = Reply.from_body(b'{"ErrorCode": 300, "Message": NaN}')

    assert reply == Reply()
    assert Reply.from_body(b'{"ErrorCode": 300, "To": Infinity}') == Reply()
