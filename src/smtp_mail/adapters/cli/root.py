"""The ``smtp-mail`` command group.

Global options are handled here once per invocation: the services factory
on ``ctx.obj`` is called, configuration is loaded for ``--profile`` with the
``--set`` overrides on top, logging is started, and the result is stored as
the :class:`~.context.CLIContext` every subcommand reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from smtp_mail import __init__conf__
from smtp_mail.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from smtp_mail.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load configuration for ``profile`` and layer ``--set`` values on top.

    Raises:
        click.UsageError: An override is malformed.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.option("--profile", default=None, help="Configuration profile to load (e.g. 'mailtrap')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration value, e.g. smtp.port=2525 (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Send pre-built messages over SMTP.

    Example:
        >>> from click.testing import CliRunner
        >>> from smtp_mail.composition import build_production
        >>> result = CliRunner().invoke(cli, ["info"], obj=build_production)
        >>> result.exit_code
        0
    """
    services_factory = ctx.obj
    if not callable(services_factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = services_factory()

    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred: command modules import from this package.
def _register_commands() -> None:
    from .commands import cli_config, cli_info, cli_send_mail

    for command in (cli_info, cli_config, cli_send_mail):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
