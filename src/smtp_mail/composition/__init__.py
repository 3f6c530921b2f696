"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..adapters.smtp.config import load_smtp_config_from_dict
from ..adapters.smtp.transport import aiosmtplib_transport_factory, smtplib_transport_factory
from ..application.mailer import SmtpMail
from ..application.ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadSmtpConfigFromDict,
)
from ..domain.settings import SmtpMailSettings

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import TransportSpy
    from ..application.ports import AsyncTransportFactory, TransportFactory

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_smtp_config_from_dict: LoadSmtpConfigFromDict = load_smtp_config_from_dict
    _assert_init_logging: InitLogging = init_logging
    _assert_transport_factory: TransportFactory = smtplib_transport_factory
    _assert_async_transport_factory: AsyncTransportFactory = aiosmtplib_transport_factory

MailerFactory = Callable[[SmtpMailSettings], SmtpMail]
"""Build an :class:`SmtpMail` for the given settings."""


def build_smtp_mail(settings: SmtpMailSettings) -> SmtpMail:
    """Return an :class:`SmtpMail` on the smtplib and aiosmtplib transports.

    Example:
        >>> from smtp_mail.domain.settings import Credential
        >>> mail = build_smtp_mail(SmtpMailSettings(Credential(host="smtp.gmail.com", username="u")))
        >>> mail.settings.credential.host
        'smtp.gmail.com'
    """
    return SmtpMail(
        settings,
        transport_factory=smtplib_transport_factory,
        async_transport_factory=aiosmtplib_transport_factory,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_smtp_config_from_dict: LoadSmtpConfigFromDict
    init_logging: InitLogging
    build_mailer: MailerFactory


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_smtp_config_from_dict=load_smtp_config_from_dict,
        init_logging=init_logging,
        build_mailer=build_smtp_mail,
    )


def build_testing(*, spy: TransportSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional TransportSpy capturing every SMTP session the mailer
            opens. When None, a fresh spy is created. Pass your own spy to
            assert on recorded sessions in tests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        TransportSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_smtp_config_from_dict_in_memory,
    )

    transport_spy = spy if spy is not None else TransportSpy()

    def _build_recording_mailer(settings: SmtpMailSettings) -> SmtpMail:
        return SmtpMail(
            settings,
            transport_factory=transport_spy.transport_factory,
            async_transport_factory=transport_spy.async_transport_factory,
        )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_smtp_config_from_dict=load_smtp_config_from_dict_in_memory,
        init_logging=init_logging_in_memory,
        build_mailer=_build_recording_mailer,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    "load_smtp_config_from_dict",
    # Logging
    "init_logging",
    # Mail
    "MailerFactory",
    "build_smtp_mail",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
