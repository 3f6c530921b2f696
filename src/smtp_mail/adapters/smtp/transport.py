"""SMTP transports driven by :class:`~smtp_mail.application.mailer.SmtpMail`.

Two adapters implement the same four-step session:

* :class:`SmtplibTransport` - blocking, on the standard library ``smtplib``.
* :class:`AiosmtplibTransport` - suspending, on ``aiosmtplib``.

Each instance wraps at most one connection and is discarded after use.
"""

from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import Message

import aiosmtplib

from smtp_mail.domain.enums import SecureSocketMode
from smtp_mail.domain.errors import TransportNotConnectedError
from smtp_mail.domain.settings import Credential, SmtpMailSettings

logger = logging.getLogger(__name__)

# aiosmtplib start_tls: True = required, None = upgrade if offered, False = never
_AIOSMTPLIB_START_TLS: dict[SecureSocketMode, bool | None] = {
    SecureSocketMode.SSL_ON_CONNECT: False,
    SecureSocketMode.STARTTLS: True,
    SecureSocketMode.STARTTLS_WHEN_AVAILABLE: None,
}


class SmtplibTransport:
    """Blocking SMTP session on :mod:`smtplib`.

    Args:
        timeout: Socket timeout in seconds.
        ssl_context: TLS context for implicit TLS and STARTTLS. Defaults to
            :func:`ssl.create_default_context`.

    Example:
        >>> transport = SmtplibTransport(timeout=5.0)
        >>> transport.connected
        False
        >>> transport.close()  # no-op before connect
    """

    def __init__(self, *, timeout: float = 30.0, ssl_context: ssl.SSLContext | None = None) -> None:
        self._timeout = timeout
        self._ssl_context = ssl_context
        self._client: smtplib.SMTP | None = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    def _context(self) -> ssl.SSLContext:
        if self._ssl_context is None:
            self._ssl_context = ssl.create_default_context()
        return self._ssl_context

    def _require_client(self, operation: str) -> smtplib.SMTP:
        if self._client is None:
            raise TransportNotConnectedError(f"Cannot {operation}: not connected")
        return self._client

    def connect(self, host: str, port: int, mode: SecureSocketMode) -> None:
        """Open the connection and apply ``mode``.

        Raises:
            smtplib.SMTPNotSupportedError: ``mode`` is STARTTLS and the server
                does not offer it.
            OSError: The connection could not be established.
        """
        if mode is SecureSocketMode.SSL_ON_CONNECT:
            client: smtplib.SMTP = smtplib.SMTP_SSL(host, port, timeout=self._timeout, context=self._context())
        else:
            client = smtplib.SMTP(host, port, timeout=self._timeout)
        self._client = client

        client.ehlo()
        upgrade = mode is SecureSocketMode.STARTTLS or (
            mode is SecureSocketMode.STARTTLS_WHEN_AVAILABLE and client.has_extn("starttls")
        )
        if upgrade:
            client.starttls(context=self._context())
            client.ehlo()
        logger.debug("SMTP connected", extra={"host": host, "port": port, "secure_socket": mode.value})

    def authenticate(self, credential: Credential) -> None:
        self._require_client("authenticate").login(credential.username, credential.password)

    def send(self, message: Message) -> None:
        self._require_client("send").send_message(message)

    def disconnect(self, quit: bool = True) -> None:
        client = self._require_client("disconnect")
        self._client = None
        if quit:
            client.quit()
        else:
            client.close()

    def close(self) -> None:
        """Drop the connection without QUIT. Safe to call repeatedly."""
        client, self._client = self._client, None
        if client is not None:
            client.close()


class AiosmtplibTransport:
    """Suspending SMTP session on :mod:`aiosmtplib`.

    Args:
        timeout: Timeout for each network operation, in seconds.
        ssl_context: TLS context for implicit TLS and STARTTLS.

    Example:
        >>> import asyncio
        >>> transport = AiosmtplibTransport(timeout=5.0)
        >>> transport.connected
        False
        >>> asyncio.run(transport.aclose())  # no-op before connect
    """

    def __init__(self, *, timeout: float = 30.0, ssl_context: ssl.SSLContext | None = None) -> None:
        self._timeout = timeout
        self._ssl_context = ssl_context
        self._client: aiosmtplib.SMTP | None = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    def _require_client(self, operation: str) -> aiosmtplib.SMTP:
        if self._client is None:
            raise TransportNotConnectedError(f"Cannot {operation}: not connected")
        return self._client

    async def connect(self, host: str, port: int, mode: SecureSocketMode) -> None:
        client = aiosmtplib.SMTP(
            hostname=host,
            port=port,
            timeout=self._timeout,
            use_tls=mode is SecureSocketMode.SSL_ON_CONNECT,
            start_tls=_AIOSMTPLIB_START_TLS[mode],
            tls_context=self._ssl_context,
        )
        self._client = client
        await client.connect()
        logger.debug("SMTP connected", extra={"host": host, "port": port, "secure_socket": mode.value})

    async def authenticate(self, credential: Credential) -> None:
        await self._require_client("authenticate").login(credential.username, credential.password)

    async def send(self, message: Message) -> None:
        await self._require_client("send").send_message(message)

    async def disconnect(self, quit: bool = True) -> None:
        client = self._require_client("disconnect")
        self._client = None
        if quit:
            await client.quit()
        else:
            client.close()

    async def aclose(self) -> None:
        """Drop the connection without QUIT. Safe to call repeatedly."""
        client, self._client = self._client, None
        if client is not None and client.is_connected:
            client.close()


def smtplib_transport_factory(settings: SmtpMailSettings) -> SmtplibTransport:
    """Build a blocking transport honouring the settings' timeout."""
    return SmtplibTransport(timeout=settings.timeout)


def aiosmtplib_transport_factory(settings: SmtpMailSettings) -> AiosmtplibTransport:
    """Build a suspending transport honouring the settings' timeout."""
    return AiosmtplibTransport(timeout=settings.timeout)


__all__ = [
    "AiosmtplibTransport",
    "SmtplibTransport",
    "aiosmtplib_transport_factory",
    "smtplib_transport_factory",
]
