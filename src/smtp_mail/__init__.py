"""Public package surface for sending pre-built messages over SMTP.

Routes imports through the architectural layers:
- Domain exports: settings, results, secure-socket selection
- Application exports: the SmtpMail sender
- Composition exports: production wiring and configuration
- Metadata: package information

Example:
    >>> from email.message import EmailMessage
    >>> from smtp_mail import Credential, SmtpMailSettings, build_smtp_mail
    >>> mail = build_smtp_mail(SmtpMailSettings(Credential(host="", username="u")))
    >>> mail.send_mail(EmailMessage())
    Failure(reason='Host can not be empty', error=None, kind=<FailureKind.CONFIGURATION: 'configuration'>)
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports (configuration model)
from .adapters.smtp.config import SmtpConfig

# Application exports
from .application.mailer import SmtpMail

# Composition exports (wired adapters)
from .composition import build_smtp_mail, get_config

# Domain exports
from .domain import (
    DEFAULT_FORCED_SECURITY,
    ETHEREAL_SMTP_HOST,
    GMAIL_SMTP_HOST,
    HOST_REQUIRED,
    MAILTRAP_SMTP_HOST,
    USERNAME_REQUIRED,
    ArgumentMissingError,
    Credential,
    Failure,
    FailureKind,
    Result,
    SecureSocketMode,
    SmtpMailSettings,
    Success,
    resolve_secure_socket_mode,
    with_forced_hosts,
)

__all__ = [
    "DEFAULT_FORCED_SECURITY",
    "ETHEREAL_SMTP_HOST",
    "GMAIL_SMTP_HOST",
    "HOST_REQUIRED",
    "MAILTRAP_SMTP_HOST",
    "USERNAME_REQUIRED",
    "ArgumentMissingError",
    "Credential",
    "Failure",
    "FailureKind",
    "Result",
    "SecureSocketMode",
    "SmtpConfig",
    "SmtpMail",
    "SmtpMailSettings",
    "Success",
    "build_smtp_mail",
    "get_config",
    "print_info",
    "resolve_secure_socket_mode",
    "with_forced_hosts",
]
