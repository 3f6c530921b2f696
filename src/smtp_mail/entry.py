"""Console script entry point for ``smtp-mail``.

Wires production services (smtplib and aiosmtplib transports, layered config,
lib_log_rich logging) before handing control to the CLI adapter.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
