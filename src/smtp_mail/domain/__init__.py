"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.result` - Success/Failure result sum type
    * :mod:`.settings` - Credential and mailer settings value objects
    * :mod:`.security` - Secure-socket mode resolution and host allow-list
    * :mod:`.enums` - Domain enumerations (OutputFormat, SecureSocketMode, FailureKind)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import FailureKind, OutputFormat, SecureSocketMode
from .errors import ArgumentMissingError, ConfigurationError, InvalidAddressError, TransportNotConnectedError
from .result import HOST_REQUIRED, USERNAME_REQUIRED, Failure, Result, Success
from .security import (
    DEFAULT_FORCED_SECURITY,
    ETHEREAL_SMTP_HOST,
    GMAIL_SMTP_HOST,
    MAILTRAP_SMTP_HOST,
    resolve_secure_socket_mode,
    with_forced_hosts,
)
from .settings import Credential, SmtpMailSettings

__all__ = [
    # Result
    "HOST_REQUIRED",
    "USERNAME_REQUIRED",
    "Failure",
    "Result",
    "Success",
    # Settings
    "Credential",
    "SmtpMailSettings",
    # Security
    "DEFAULT_FORCED_SECURITY",
    "ETHEREAL_SMTP_HOST",
    "GMAIL_SMTP_HOST",
    "MAILTRAP_SMTP_HOST",
    "resolve_secure_socket_mode",
    "with_forced_hosts",
    # Enums
    "FailureKind",
    "OutputFormat",
    "SecureSocketMode",
    # Errors
    "ArgumentMissingError",
    "ConfigurationError",
    "InvalidAddressError",
    "TransportNotConnectedError",
]
