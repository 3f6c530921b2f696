"""Type-safe domain enums for output formats, socket security, and failures."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class SecureSocketMode(str, Enum):
    """How the SMTP connection is secured.

    Attributes:
        SSL_ON_CONNECT: TLS handshake right after the TCP connect (implicit TLS).
        STARTTLS: Plaintext connect, then a mandatory STARTTLS upgrade.
        STARTTLS_WHEN_AVAILABLE: Plaintext connect, upgraded only when the
            server advertises STARTTLS.

    Example:
        >>> SecureSocketMode.STARTTLS.value
        'starttls'
        >>> SecureSocketMode("ssl_on_connect") is SecureSocketMode.SSL_ON_CONNECT
        True
    """

    SSL_ON_CONNECT = "ssl_on_connect"
    STARTTLS = "starttls"
    STARTTLS_WHEN_AVAILABLE = "starttls_when_available"


class FailureKind(str, Enum):
    """Which step of the delivery sequence produced a failure.

    Example:
        >>> FailureKind.TRANSPORT == "transport"
        True
    """

    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    TRANSPORT = "transport"


__all__ = [
    "FailureKind",
    "OutputFormat",
    "SecureSocketMode",
]
