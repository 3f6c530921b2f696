"""SMTP adapter - transports and configuration.

Structure:
    * :mod:`.config` - SMTP configuration model and loader
    * :mod:`.transport` - smtplib and aiosmtplib session transports
    * :mod:`.message` - Plain-text message construction for the CLI

Contents:
    * :class:`.config.SmtpConfig` - SMTP configuration container
    * :func:`.config.load_smtp_config_from_dict` - Config dict loader
    * :class:`.transport.SmtplibTransport` - Blocking transport
    * :class:`.transport.AiosmtplibTransport` - Suspending transport
"""

from __future__ import annotations

from .config import SmtpConfig, load_smtp_config_from_dict
from .message import build_text_message, validate_address
from .transport import (
    AiosmtplibTransport,
    SmtplibTransport,
    aiosmtplib_transport_factory,
    smtplib_transport_factory,
)

__all__ = [
    "AiosmtplibTransport",
    "SmtpConfig",
    "SmtplibTransport",
    "aiosmtplib_transport_factory",
    "build_text_message",
    "load_smtp_config_from_dict",
    "smtplib_transport_factory",
    "validate_address",
]
