"""Message construction stories for the send-mail command."""

from __future__ import annotations

import pytest

from smtp_mail.adapters.smtp.message import build_text_message, validate_address
from smtp_mail.domain import InvalidAddressError


@pytest.mark.os_agnostic
def test_message_carries_addressing_headers() -> None:
    message = build_text_message(
        from_address="sender@test.com",
        recipients=["a@test.com", "b@test.com"],
        subject="Report",
        body="Numbers attached",
    )

    assert message["From"] == "sender@test.com"
    assert message["To"] == "a@test.com, b@test.com"
    assert message["Subject"] == "Report"
    assert message.get_content().strip() == "Numbers attached"


@pytest.mark.os_agnostic
def test_message_gets_date_and_message_id() -> None:
    message = build_text_message(from_address="sender@test.com", recipients=["a@test.com"], subject="x")

    assert message["Date"]
    assert message["Message-ID"].startswith("<")


@pytest.mark.os_agnostic
def test_message_body_keeps_non_ascii_text() -> None:
    message = build_text_message(
        from_address="sender@test.com", recipients=["a@test.com"], subject="Grüße", body="Schöne Grüße"
    )

    assert message.get_content().strip() == "Schöne Grüße"


@pytest.mark.os_agnostic
def test_no_recipients_is_rejected() -> None:
    with pytest.raises(ValueError, match="recipient"):
        build_text_message(from_address="sender@test.com", recipients=[], subject="x")


@pytest.mark.os_agnostic
def test_invalid_sender_names_its_role() -> None:
    with pytest.raises(InvalidAddressError, match="Invalid sender: nobody"):
        build_text_message(from_address="nobody", recipients=["a@test.com"], subject="x")


@pytest.mark.os_agnostic
def test_invalid_recipient_names_its_role() -> None:
    with pytest.raises(InvalidAddressError, match="Invalid recipient: broken@"):
        validate_address("broken@")


@pytest.mark.os_agnostic
def test_valid_address_passes_silently() -> None:
    assert validate_address("someone@example.org") is None
