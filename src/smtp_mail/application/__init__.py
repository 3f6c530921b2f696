"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for transports and adapter functions
    * :mod:`.mailer` - SmtpMail and the shared delivery plan
"""

from __future__ import annotations

from .mailer import SmtpMail, plan_delivery, run_async, run_blocking
from .ports import (
    AsyncSmtpTransport,
    AsyncTransportFactory,
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadSmtpConfigFromDict,
    SmtpTransport,
    TransportFactory,
)

__all__ = [
    "AsyncSmtpTransport",
    "AsyncTransportFactory",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadSmtpConfigFromDict",
    "SmtpMail",
    "SmtpTransport",
    "TransportFactory",
    "plan_delivery",
    "run_async",
    "run_blocking",
]
