"""Process entry for ``smtp-mail`` and ``python -m smtp_mail``.

Runs the Click group in non-standalone mode so the exit code comes back as
a value, renders unexpected errors through lib_cli_exit_tools, and shuts the
lib_log_rich runtime down once the command is finished.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from smtp_mail import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from smtp_mail.composition import AppServices


def _report_unhandled(exc: BaseException) -> int:
    """Print ``exc`` the lib_cli_exit_tools way and map it to an exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        # lib_cli_exit_tools.run_cli cannot hand ctx.obj through, so Click is driven directly.
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001  SystemExit included
        return _report_unhandled(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback switches back afterwards.
        services_factory: Builds the AppServices, normally
            :func:`smtp_mail.composition.build_production`.

    Raises:
        ValueError: ``services_factory`` is missing.

    Example:
        >>> from smtp_mail.composition import build_production
        >>> main(["--version"], services_factory=build_production)  # doctest: +SKIP
        smtp-mail version 1.0.0
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # other threads may still be logging
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
