"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.smtp` - Recording SMTP transports (TransportSpy)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_smtp_config_from_dict_in_memory,
)
from .logging import init_logging_in_memory
from .smtp import AsyncRecordingTransport, RecordingTransport, TransportSpy

# Static conformance assertions
if TYPE_CHECKING:
    from smtp_mail.application.ports import (
        AsyncSmtpTransport,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadSmtpConfigFromDict,
        SmtpTransport,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_smtp_config: LoadSmtpConfigFromDict = load_smtp_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_transport: SmtpTransport = RecordingTransport()
    _assert_async_transport: AsyncSmtpTransport = AsyncRecordingTransport()

__all__ = [
    "AsyncRecordingTransport",
    "RecordingTransport",
    "TransportSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_smtp_config_from_dict_in_memory",
]
