"""Command-line interface for smtp_mail.

``cli`` is the rich_click group, ``main`` runs it with error handling, and
the ``cli_*`` names are its subcommands. The traceback helpers are exported
for tests that need to snapshot and restore the lib_cli_exit_tools switches.
"""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_send_mail
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_info",
    "cli_send_mail",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
