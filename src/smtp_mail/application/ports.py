"""Application ports: Protocol definitions for transports and adapter functions.

Transport protocols describe the four SMTP session steps the mailer drives.
The callable protocols define ``__call__`` signatures that existing
module-level adapter functions satisfy via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``SmtpConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from email.message import Message
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat, SecureSocketMode
from ..domain.settings import Credential, SmtpMailSettings

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.smtp.config import SmtpConfig


class SmtpTransport(Protocol):
    """Blocking SMTP session: one connection, used once, then closed."""

    def connect(self, host: str, port: int, mode: SecureSocketMode) -> None: ...

    def authenticate(self, credential: Credential) -> None: ...

    def send(self, message: Message) -> None: ...

    def disconnect(self, quit: bool = ...) -> None: ...

    def close(self) -> None: ...


class AsyncSmtpTransport(Protocol):
    """Suspending SMTP session; each step is an await point."""

    async def connect(self, host: str, port: int, mode: SecureSocketMode) -> None: ...

    async def authenticate(self, credential: Credential) -> None: ...

    async def send(self, message: Message) -> None: ...

    async def disconnect(self, quit: bool = ...) -> None: ...

    async def aclose(self) -> None: ...


class TransportFactory(Protocol):
    """Build a fresh blocking transport for one delivery."""

    def __call__(self, settings: SmtpMailSettings) -> SmtpTransport: ...


class AsyncTransportFactory(Protocol):
    """Build a fresh suspending transport for one delivery."""

    def __call__(self, settings: SmtpMailSettings) -> AsyncSmtpTransport: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadSmtpConfigFromDict(Protocol):
    """Load SmtpConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> SmtpConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "AsyncSmtpTransport",
    "AsyncTransportFactory",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadSmtpConfigFromDict",
    "SmtpTransport",
    "TransportFactory",
]
