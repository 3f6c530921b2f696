"""Per-invocation CLI state and the shared traceback switches.

The root group loads configuration and services once, then parks them on
``ctx.obj`` as a :class:`CLIContext`. Subcommands fetch it back with
:func:`get_cli_context`. Traceback display lives in the process-wide
``lib_cli_exit_tools.config``; the helpers here flip it and put it back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from smtp_mail.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as read from lib_cli_exit_tools."""


@dataclass(slots=True)
class CLIContext:
    """What ``send-mail``, ``config`` and ``info`` need from the root group.

    ``profile`` and ``set_overrides`` are kept so a subcommand that reloads
    configuration for another profile can reapply the same ``--set`` values.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the built CLIContext."""
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root group.

    Raises:
        RuntimeError: The command was invoked without going through ``cli``.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=Config({}, {}), services=MagicMock())
        >>> get_cli_context(ctx).profile is None
        True
    """
    state = ctx.obj
    if not isinstance(state, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return state


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools."""
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback switches.

    Example:
        >>> len(snapshot_traceback_state())
        2
    """
    settings = lib_cli_exit_tools.config
    return bool(getattr(settings, "traceback", False)), bool(getattr(settings, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    """Write back switches captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
