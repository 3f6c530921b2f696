"""Secure-socket selection for an SMTP host.

Some providers misbehave with implicit TLS on their submission ports, so a
small allow-list maps host substrings to a forced :class:`SecureSocketMode`.
Hosts that match nothing follow the configured ``use_ssl`` flag.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Final

from .enums import SecureSocketMode

#: Google Mail submission host.
GMAIL_SMTP_HOST: Final[str] = "smtp.gmail.com"

#: Ethereal fake SMTP service host.
ETHEREAL_SMTP_HOST: Final[str] = "smtp.ethereal.email"

#: Mailtrap sandbox host.
MAILTRAP_SMTP_HOST: Final[str] = "smtp.mailtrap.io"

#: Host substrings that always negotiate STARTTLS, whatever ``use_ssl`` says.
DEFAULT_FORCED_SECURITY: Final[Mapping[str, SecureSocketMode]] = MappingProxyType(
    {
        "smtp.mailtrap": SecureSocketMode.STARTTLS,
        "smtp.ethereal": SecureSocketMode.STARTTLS,
    }
)


def with_forced_hosts(
    substrings: Iterable[str],
    mode: SecureSocketMode = SecureSocketMode.STARTTLS,
    base: Mapping[str, SecureSocketMode] = DEFAULT_FORCED_SECURITY,
) -> Mapping[str, SecureSocketMode]:
    """Return a read-only copy of ``base`` extended with more host substrings.

    Blank entries are skipped. Entries already in ``base`` are overwritten
    with ``mode``.

    Example:
        >>> forced = with_forced_hosts(["smtp.sendgrid"])
        >>> forced["smtp.sendgrid"].value
        'starttls'
        >>> sorted(forced)
        ['smtp.ethereal', 'smtp.mailtrap', 'smtp.sendgrid']
    """
    merged = dict(base)
    for substring in substrings:
        cleaned = substring.strip()
        if cleaned:
            merged[cleaned] = mode
    return MappingProxyType(merged)


def resolve_secure_socket_mode(
    host: str,
    use_ssl: bool,
    forced: Mapping[str, SecureSocketMode] = DEFAULT_FORCED_SECURITY,
) -> SecureSocketMode:
    """Choose how to secure the connection to ``host``.

    The trimmed host is tested against each key of ``forced`` with a
    case-sensitive substring match; the first hit decides. Otherwise
    ``use_ssl`` selects implicit TLS or an opportunistic STARTTLS upgrade.

    Args:
        host: SMTP host name as configured.
        use_ssl: Configured implicit-TLS flag.
        forced: Host substring to mode mapping.

    Returns:
        The mode to pass to the transport's ``connect``.

    Example:
        >>> resolve_secure_socket_mode("smtp.mailtrap.io", use_ssl=True).value
        'starttls'
        >>> resolve_secure_socket_mode(" smtp.ethereal.email ", use_ssl=False).value
        'starttls'
        >>> resolve_secure_socket_mode("smtp.gmail.com", use_ssl=True).value
        'ssl_on_connect'
        >>> resolve_secure_socket_mode("smtp.gmail.com", use_ssl=False).value
        'starttls_when_available'
        >>> resolve_secure_socket_mode("SMTP.MAILTRAP.IO", use_ssl=True).value
        'ssl_on_connect'
    """
    trimmed = host.strip()
    for substring, mode in forced.items():
        if substring in trimmed:
            return mode
    return SecureSocketMode.SSL_ON_CONNECT if use_ssl else SecureSocketMode.STARTTLS_WHEN_AVAILABLE


__all__ = [
    "DEFAULT_FORCED_SECURITY",
    "ETHEREAL_SMTP_HOST",
    "GMAIL_SMTP_HOST",
    "MAILTRAP_SMTP_HOST",
    "resolve_secure_socket_mode",
    "with_forced_hosts",
]
