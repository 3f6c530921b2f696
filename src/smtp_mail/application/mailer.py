"""Send a pre-built message over one SMTP session and report a Result.

The delivery sequence is written once, as the generator :func:`plan_delivery`.
It yields transport steps and returns the :data:`~smtp_mail.domain.result.Result`.
Two drivers execute it:

* :func:`run_blocking` calls each step on a :class:`SmtpTransport`.
* :func:`run_async` awaits each step on an :class:`AsyncSmtpTransport`.

A step that raises is thrown back into the plan at the ``yield`` that
produced it, so the plan alone decides which failures become values and
which propagate. Both drivers close the transport on every exit path.

Contents:
    * :class:`SmtpMail` - Public sender with blocking and async entry points.
    * :func:`plan_delivery` - The connect/authenticate/send/disconnect sequence.
    * :func:`run_blocking` / :func:`run_async` - Plan drivers.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import aclosing, closing
from dataclasses import dataclass
from email.message import Message
from typing import Any, TypeAlias, cast

from ..domain.enums import FailureKind, SecureSocketMode
from ..domain.errors import ArgumentMissingError
from ..domain.result import HOST_REQUIRED, USERNAME_REQUIRED, Failure, Result, Success
from ..domain.security import resolve_secure_socket_mode
from ..domain.settings import Credential, SmtpMailSettings
from .ports import AsyncSmtpTransport, AsyncTransportFactory, SmtpTransport, TransportFactory

logger = logging.getLogger(__name__)

Session: TypeAlias = SmtpTransport | AsyncSmtpTransport


@dataclass(frozen=True, slots=True)
class Connect:
    """Open the connection with the resolved security mode."""

    host: str
    port: int
    mode: SecureSocketMode

    def invoke(self, transport: Session) -> Any:
        return transport.connect(self.host, self.port, self.mode)


@dataclass(frozen=True, slots=True)
class Authenticate:
    """Log in with the configured credential."""

    credential: Credential

    def invoke(self, transport: Session) -> Any:
        return transport.authenticate(self.credential)


@dataclass(frozen=True, slots=True)
class Send:
    """Hand the message to the server."""

    message: Message

    def invoke(self, transport: Session) -> Any:
        return transport.send(self.message)


@dataclass(frozen=True, slots=True)
class Disconnect:
    """End the session, sending QUIT when ``quit`` is set."""

    quit: bool = True

    def invoke(self, transport: Session) -> Any:
        return transport.disconnect(self.quit)


TransportStep: TypeAlias = Connect | Authenticate | Send | Disconnect
DeliveryPlan: TypeAlias = Generator[TransportStep, None, Result]


def plan_delivery(settings: SmtpMailSettings, message: Message) -> DeliveryPlan:
    """Yield the SMTP session steps for ``message`` and return the outcome.

    Order: host check, connect, username check, authenticate, send,
    disconnect. Connect faults are not caught and reach the caller.
    Authentication faults and send/disconnect faults are returned as
    :class:`Failure` values carrying the original exception.

    Example:
        >>> from smtp_mail.domain.settings import Credential, SmtpMailSettings
        >>> plan = plan_delivery(SmtpMailSettings(Credential(host="  ")), Message())
        >>> try:
        ...     next(plan)
        ... except StopIteration as stop:
        ...     print(stop.value.reason)
        Host can not be empty
    """
    credential = settings.credential
    host = (credential.host or "").strip()
    if not host:
        return Failure(HOST_REQUIRED)

    mode = resolve_secure_socket_mode(host, credential.use_ssl, settings.forced_security)
    logger.debug("Connecting", extra={"host": host, "port": credential.port, "secure_socket": mode.value})
    yield Connect(host, credential.port, mode)

    if not credential.username:
        return Failure(USERNAME_REQUIRED)

    try:
        yield Authenticate(credential)
    except Exception as exc:
        logger.debug("SMTP authentication failed", exc_info=True)
        return Failure.from_exception(exc, kind=FailureKind.AUTHENTICATION)

    try:
        yield Send(message)
        yield Disconnect(quit=True)
    except Exception as exc:
        logger.debug("SMTP delivery failed", exc_info=True)
        return Failure.from_exception(exc, kind=FailureKind.TRANSPORT)

    return Success()


def run_blocking(plan: DeliveryPlan, transport: SmtpTransport) -> Result:
    """Drive ``plan`` to completion, blocking on each step."""
    with closing(transport):
        try:
            step = next(plan)
            while True:
                try:
                    step.invoke(transport)
                except Exception as exc:
                    step = plan.throw(exc)
                else:
                    step = next(plan)
        except StopIteration as stop:
            return cast(Result, stop.value)
        finally:
            plan.close()


async def run_async(plan: DeliveryPlan, transport: AsyncSmtpTransport) -> Result:
    """Drive ``plan`` to completion, awaiting each step.

    Task cancellation surfaces as ``asyncio.CancelledError`` at the step
    being awaited. It is not an ``Exception``, so the plan never turns it
    into a Failure; it propagates after the transport is closed.
    """
    async with aclosing(transport):
        try:
            step = next(plan)
            while True:
                try:
                    await step.invoke(transport)
                except Exception as exc:
                    step = plan.throw(exc)
                else:
                    step = next(plan)
        except StopIteration as stop:
            return cast(Result, stop.value)
        finally:
            plan.close()


def _require_message(message: Message | None) -> Message:
    if message is None:
        raise ArgumentMissingError("message can not be None")
    return message


class SmtpMail:
    """Send pre-built messages with one settings bundle.

    Each call opens its own transport from the factory, so one instance can
    be reused for many sequential sends without sharing connection state.

    Args:
        settings: Immutable connection and credential settings.
        transport_factory: Builds the blocking transport for :meth:`send_mail`.
        async_transport_factory: Builds the transport for :meth:`send_mail_async`.

    Example:
        >>> from smtp_mail.adapters.memory import RecordingTransport
        >>> from smtp_mail.domain.settings import Credential, SmtpMailSettings
        >>> transport = RecordingTransport()
        >>> mail = SmtpMail(
        ...     SmtpMailSettings(Credential(host="smtp.example.com", username="u", password="p")),
        ...     transport_factory=lambda _settings: transport,
        ...     async_transport_factory=lambda _settings: NotImplemented,
        ... )
        >>> mail.send_mail(Message())
        Success()
        >>> [call[0] for call in transport.calls]
        ['connect', 'authenticate', 'send', 'disconnect', 'close']
    """

    def __init__(
        self,
        settings: SmtpMailSettings,
        *,
        transport_factory: TransportFactory,
        async_transport_factory: AsyncTransportFactory,
    ) -> None:
        self._settings = settings
        self._transport_factory = transport_factory
        self._async_transport_factory = async_transport_factory

    @property
    def settings(self) -> SmtpMailSettings:
        return self._settings

    def send_mail(self, message: Message) -> Result:
        """Send ``message`` synchronously.

        Returns:
            :class:`Success`, or :class:`Failure` for an empty host or
            username, a rejected login, or a failed send/disconnect.

        Raises:
            ArgumentMissingError: ``message`` is None.
            Exception: Whatever the transport raises while connecting.
        """
        _require_message(message)
        logger.info("Sending mail", extra=self._log_context(message))
        transport = self._transport_factory(self._settings)
        result = run_blocking(plan_delivery(self._settings, message), transport)
        self._log_result(result)
        return result

    async def send_mail_async(self, message: Message) -> Result:
        """Send ``message`` without blocking the event loop.

        Same contract as :meth:`send_mail`. Cancel the surrounding task to
        abort; the transport is closed before ``CancelledError`` propagates.
        """
        _require_message(message)
        logger.info("Sending mail", extra={**self._log_context(message), "mode": "async"})
        transport = self._async_transport_factory(self._settings)
        result = await run_async(plan_delivery(self._settings, message), transport)
        self._log_result(result)
        return result

    def _log_context(self, message: Message) -> dict[str, Any]:
        return {
            "host": self._settings.credential.host,
            "port": self._settings.credential.port,
            "subject": message.get("Subject"),
            "recipients": message.get_all("To", []),
        }

    def _log_result(self, result: Result) -> None:
        match result:
            case Success():
                logger.info("Mail sent successfully", extra={"host": self._settings.credential.host})
            case Failure(reason=reason, kind=kind):
                logger.warning(
                    "Mail sending failed",
                    extra={"host": self._settings.credential.host, "reason": reason, "kind": kind.value},
                )


__all__ = [
    "Authenticate",
    "Connect",
    "DeliveryPlan",
    "Disconnect",
    "Send",
    "SmtpMail",
    "TransportStep",
    "plan_delivery",
    "run_async",
    "run_blocking",
]
