"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ArgumentMissingError(ValueError):
    """A required argument was ``None``.

    Raised at the public entry points before any result-producing logic
    runs. Inherits from ValueError so callers treating it as an invalid
    argument keep working.

    Example:
        >>> from smtp_mail.domain.errors import ArgumentMissingError
        >>> err = ArgumentMissingError("message")
        >>> str(err)
        'message'
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when configuration values cannot be turned into settings at all.
    Empty host or username are not errors; the mailer reports those as
    :class:`~smtp_mail.domain.result.Failure` values.

    Example:
        >>> from smtp_mail.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No [smtp] section configured")
        >>> str(err)
        'No [smtp] section configured'
    """


class InvalidAddressError(ValueError):
    """Email address validation failure.

    Raised when a sender or recipient address fails RFC 5321/5322 validation
    while building a message on the CLI.

    Example:
        >>> from smtp_mail.domain.errors import InvalidAddressError
        >>> isinstance(InvalidAddressError("Invalid recipient: nobody"), ValueError)
        True
    """


class TransportNotConnectedError(RuntimeError):
    """A transport operation was attempted before ``connect``.

    Example:
        >>> from smtp_mail.domain.errors import TransportNotConnectedError
        >>> str(TransportNotConnectedError("send"))
        'send'
    """


__all__ = [
    "ArgumentMissingError",
    "ConfigurationError",
    "InvalidAddressError",
    "TransportNotConnectedError",
]
