"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks.

Contents:
    * :mod:`.smtp` - smtplib/aiosmtplib transports and SMTP configuration
    * :mod:`.config` - Layered configuration loading, display, and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich_click CLI
    * :mod:`.memory` - In-memory doubles for tests
"""

from __future__ import annotations

__all__: list[str] = []
