"""In-memory SMTP transports for testing.

Provides transports that satisfy the same Protocols as the production
adapters but open no sockets. Every call is recorded so tests can assert
on the exact session sequence.

Contents:
    * :class:`RecordingTransport` - Blocking transport double.
    * :class:`AsyncRecordingTransport` - Suspending transport double.
    * :class:`TransportSpy` - Factory handing out recorders and keeping them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from email.message import Message
from typing import Any

from ...domain.enums import SecureSocketMode
from ...domain.settings import Credential, SmtpMailSettings

Call = tuple[Any, ...]


def _empty_call_list() -> list[Call]:
    """Create an empty typed list for call records."""
    return []


def _empty_error_map() -> dict[str, BaseException]:
    """Create an empty typed map of step name to exception."""
    return {}


@dataclass
class RecordingTransport:
    """Records session calls; raises on demand.

    Attributes:
        calls: ``(operation, *arguments)`` tuples in call order.
        fail_on: Step name (``connect``, ``authenticate``, ``send``,
            ``disconnect``) to the exception that step raises.

    Example:
        >>> transport = RecordingTransport(fail_on={"send": OSError("boom")})
        >>> transport.connect("smtp.example.com", 25, SecureSocketMode.STARTTLS)
        >>> transport.send(Message())
        Traceback (most recent call last):
        ...
        OSError: boom
        >>> transport.operations
        ['connect', 'send']
    """

    calls: list[Call] = field(default_factory=_empty_call_list)
    fail_on: dict[str, BaseException] = field(default_factory=_empty_error_map)
    connected: bool = False

    @property
    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]

    def count(self, operation: str) -> int:
        return self.operations.count(operation)

    def _record(self, operation: str, *arguments: Any) -> None:
        self.calls.append((operation, *arguments))
        error = self.fail_on.get(operation)
        if error is not None:
            raise error

    def connect(self, host: str, port: int, mode: SecureSocketMode) -> None:
        self._record("connect", host, port, mode)
        self.connected = True

    def authenticate(self, credential: Credential) -> None:
        self._record("authenticate", credential)

    def send(self, message: Message) -> None:
        self._record("send", message)

    def disconnect(self, quit: bool = True) -> None:
        self._record("disconnect", quit)
        self.connected = False

    def close(self) -> None:
        self.calls.append(("close",))
        self.connected = False


@dataclass
class AsyncRecordingTransport(RecordingTransport):
    """Suspending twin of :class:`RecordingTransport`.

    Example:
        >>> import asyncio
        >>> transport = AsyncRecordingTransport()
        >>> asyncio.run(transport.connect("smtp.example.com", 465, SecureSocketMode.SSL_ON_CONNECT))
        >>> transport.connected
        True
    """

    async def connect(self, host: str, port: int, mode: SecureSocketMode) -> None:  # type: ignore[override]
        RecordingTransport.connect(self, host, port, mode)

    async def authenticate(self, credential: Credential) -> None:  # type: ignore[override]
        RecordingTransport.authenticate(self, credential)

    async def send(self, message: Message) -> None:  # type: ignore[override]
        RecordingTransport.send(self, message)

    async def disconnect(self, quit: bool = True) -> None:  # type: ignore[override]
        RecordingTransport.disconnect(self, quit)

    async def aclose(self) -> None:
        RecordingTransport.close(self)


@dataclass
class TransportSpy:
    """Hands out a fresh recorder per delivery and keeps every one of them.

    Each test should create its own TransportSpy to avoid cross-test pollution.
    ``fail_on`` is copied into every transport the spy builds.

    Example:
        >>> spy = TransportSpy()
        >>> settings = SmtpMailSettings(Credential(host="smtp.example.com"))
        >>> first = spy.transport_factory(settings)
        >>> second = spy.transport_factory(settings)
        >>> first is second, len(spy.transports)
        (False, 2)
    """

    fail_on: dict[str, BaseException] = field(default_factory=_empty_error_map)
    transports: list[RecordingTransport] = field(default_factory=list)
    settings_seen: list[SmtpMailSettings] = field(default_factory=list)

    def transport_factory(self, settings: SmtpMailSettings) -> RecordingTransport:
        transport = RecordingTransport(fail_on=dict(self.fail_on))
        self.settings_seen.append(settings)
        self.transports.append(transport)
        return transport

    def async_transport_factory(self, settings: SmtpMailSettings) -> AsyncRecordingTransport:
        transport = AsyncRecordingTransport(fail_on=dict(self.fail_on))
        self.settings_seen.append(settings)
        self.transports.append(transport)
        return transport

    @property
    def last(self) -> RecordingTransport:
        return self.transports[-1]

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.transports.clear()
        self.settings_seen.clear()
        self.fail_on.clear()


__all__ = [
    "AsyncRecordingTransport",
    "RecordingTransport",
    "TransportSpy",
]
