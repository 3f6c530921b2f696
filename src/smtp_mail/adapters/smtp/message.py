"""Plain-text message construction for the CLI.

The mailer treats messages as opaque; the CLI needs one simple way to build
them from flags. Addresses are checked with btx_lib_mail so typos fail before
any connection is made.
"""

from __future__ import annotations

from collections.abc import Sequence
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from btx_lib_mail import validate_email_address

from smtp_mail.domain.errors import InvalidAddressError


def validate_address(address: str, role: str = "recipient") -> None:
    """Validate a single email address.

    Raises:
        InvalidAddressError: When the email address is invalid.

    Example:
        >>> validate_address("valid@example.com")
        >>> validate_address("invalid")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidAddressError: Invalid recipient: invalid
    """
    try:
        validate_email_address(address)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid {role}: {address}") from e


def build_text_message(
    *,
    from_address: str,
    recipients: Sequence[str],
    subject: str,
    body: str = "",
) -> EmailMessage:
    """Build a UTF-8 plain-text message with Date and Message-ID headers.

    Raises:
        InvalidAddressError: Sender or a recipient is malformed.
        ValueError: No recipients given.

    Example:
        >>> msg = build_text_message(
        ...     from_address="me@example.com", recipients=["you@example.com"], subject="Hi", body="Hello"
        ... )
        >>> msg["To"], msg["Subject"]
        ('you@example.com', 'Hi')
        >>> msg.get_content().strip()
        'Hello'
    """
    if not recipients:
        raise ValueError("At least one recipient is required")
    validate_address(from_address, role="sender")
    for recipient in recipients:
        validate_address(recipient)

    message = EmailMessage()
    message["From"] = from_address
    message["To"] = ", ".join(recipients)
    message["Subject"] = subject
    message["Date"] = formatdate(localtime=True)
    message["Message-ID"] = make_msgid()
    message.set_content(body)
    return message


__all__ = ["build_text_message", "validate_address"]
