"""``smtp-mail info``: print name, version and entry point of the installation."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from smtp_mail import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show package metadata."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata", extra={"version": __init__conf__.version})
        __init__conf__.print_info()


__all__ = ["cli_info"]
