"""Connection and credential settings owned by one mailer instance."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .enums import SecureSocketMode
from .security import DEFAULT_FORCED_SECURITY


@dataclass(frozen=True, slots=True)
class Credential:
    """Everything needed to open and authenticate one SMTP session.

    Empty ``host`` or ``username`` are representable; the mailer
    reports them as failures instead of refusing to build settings.
    ``domain`` is carried as data; PLAIN and LOGIN authentication send
    ``username`` unchanged.

    Example:
        >>> cred = Credential(host="smtp.example.com", username="u", password="secret")
        >>> cred.port
        587
        >>> "secret" in repr(cred)
        False
    """

    host: str = ""
    port: int = 587
    username: str = ""
    password: str = field(default="", repr=False)
    domain: str | None = None
    use_ssl: bool = False


@dataclass(frozen=True, slots=True)
class SmtpMailSettings:
    """Immutable settings for a :class:`~smtp_mail.application.mailer.SmtpMail`.

    Attributes:
        credential: Host, port, and login data.
        forced_security: Host substring to secure-socket mode allow-list.
        timeout: Socket timeout handed to the transport, in seconds.

    Example:
        >>> settings = SmtpMailSettings(Credential(host="smtp.example.com"))
        >>> settings.timeout
        30.0
        >>> sorted(settings.forced_security)
        ['smtp.ethereal', 'smtp.mailtrap']
    """

    credential: Credential
    forced_security: Mapping[str, SecureSocketMode] = field(default_factory=lambda: DEFAULT_FORCED_SECURITY)
    timeout: float = 30.0


__all__ = [
    "Credential",
    "SmtpMailSettings",
]
