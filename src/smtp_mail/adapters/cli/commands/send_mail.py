"""Send mail CLI command.

Builds a plain-text message from flags and hands it to ``SmtpMail``. The
``[smtp]`` configuration section supplies the connection settings; every
field can be overridden per invocation.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import os
from collections.abc import Callable
from typing import Any, NoReturn, cast

import aiosmtplib
import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from smtp_mail.adapters.smtp.config import SmtpConfig
from smtp_mail.adapters.smtp.message import build_text_message
from smtp_mail.domain.enums import FailureKind
from smtp_mail.domain.errors import ConfigurationError
from smtp_mail.domain.result import Failure, Result, Success

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FAILURE_EXIT_CODES: dict[FailureKind, ExitCode] = {
    FailureKind.CONFIGURATION: ExitCode.CONFIG_ERROR,
    FailureKind.AUTHENTICATION: ExitCode.AUTH_FAILURE,
    FailureKind.TRANSPORT: ExitCode.SMTP_FAILURE,
}


_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "key",
        "login",
    }
)

_SANITIZED_MESSAGE = "Mail delivery failed. Check SMTP configuration."


def sanitize_error_message(text: str) -> str:
    """Return ``text`` unless it looks like it carries login data.

    The unfiltered text still goes to the log; only the terminal output
    is replaced.

    Example:
        >>> sanitize_error_message("SMTPDataError: (554, b'rejected')")
        "SMTPDataError: (554, b'rejected')"
        >>> sanitize_error_message("SMTPAuthenticationError: (535, b'bad password')")
        'Mail delivery failed. Check SMTP configuration.'
    """
    lowered = text.lower()
    if any(keyword in lowered for keyword in _SENSITIVE_KEYWORDS):
        return _SANITIZED_MESSAGE
    return text


def filter_sentinels(**kwargs: Any) -> dict[str, Any]:
    """Drop unset options (None, empty tuple); turn tuples into lists.

    Example:
        >>> filter_sentinels(host=None, port=2525, forced_starttls_hosts=("smtp.x",), username=())
        {'port': 2525, 'forced_starttls_hosts': ['smtp.x']}
    """
    result: dict[str, Any] = {}
    for k, v in kwargs.items():
        if v is None or v == ():
            continue
        if isinstance(v, tuple):
            result[k] = list(cast(tuple[Any, ...], v))
        else:
            result[k] = v
    return result


def apply_validated_overrides(base_config: SmtpConfig, overrides: dict[str, Any]) -> SmtpConfig:
    """Merge ``overrides`` into ``base_config`` and re-run every validator.

    Raises:
        ValidationError: When overrides contain invalid values.
    """
    if not overrides:
        return base_config
    return SmtpConfig.model_validate({**base_config.model_dump(), **overrides})


def smtp_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add one override flag per ``[smtp]`` configuration field."""
    options = [
        click.option("--host", default=None, help="Override SMTP host"),
        click.option("--port", type=int, default=None, help="Override SMTP port"),
        click.option("--username", default=None, help="Override SMTP login user"),
        click.option("--password", default=None, help="Override SMTP password"),
        click.option("--domain", default=None, help="Override credential domain"),
        click.option("--use-ssl/--no-use-ssl", default=None, help="Override implicit TLS"),
        click.option("--timeout", type=float, default=None, help="Override socket timeout in seconds"),
        click.option(
            "--force-starttls",
            "forced_starttls_hosts",
            multiple=True,
            default=(),
            help="Extra host substring that always uses STARTTLS (repeatable)",
        ),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def _fail(exc: BaseException, log_message: str, user_message: str, exit_code: ExitCode) -> NoReturn:
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {user_message} - {sanitize_error_message(str(exc))}", err=True)
    raise SystemExit(exit_code)


def _report(result: Result) -> None:
    """Echo the outcome; exit non-zero for a Failure."""
    match result:
        case Success():
            click.echo("\nMail sent successfully!")
        case Failure(reason=reason, kind=kind):
            click.echo(f"\nError: {sanitize_error_message(reason)}", err=True)
            raise SystemExit(_FAILURE_EXIT_CODES[kind])


@click.command("send-mail", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipients", multiple=True, required=True, help="Recipient address (repeatable)")
@click.option("--from", "from_address", required=True, help="Sender address")
@click.option("--subject", required=True, help="Subject line")
@click.option("--body", default="", help="Plain-text body")
@click.option("--async", "use_async", is_flag=True, default=False, help="Send on an asyncio event loop")
@smtp_options
@click.pass_context
def cli_send_mail(
    ctx: click.Context,
    recipients: tuple[str, ...],
    from_address: str,
    subject: str,
    body: str,
    use_async: bool,
    host: str | None,
    port: int | None,
    username: str | None,
    password: str | None,
    domain: str | None,
    use_ssl: bool | None,
    timeout: float | None,
    forced_starttls_hosts: tuple[str, ...],
) -> None:
    """Send a plain-text message through the configured SMTP server.

    Exit codes: 0 sent, 22 invalid argument, 69 SMTP failure,
    77 authentication rejected, 78 configuration error.
    """
    cli_ctx = get_cli_context(ctx)
    recipient_list = list(recipients)
    extra = {"command": "send-mail", "recipients": recipient_list, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-mail", extra=extra):
        try:
            smtp_config = cli_ctx.services.load_smtp_config_from_dict(cli_ctx.config.as_dict())
        except (ConfigurationError, ValidationError) as exc:
            _fail(exc, "Invalid SMTP configuration", "Configuration error", ExitCode.CONFIG_ERROR)

        try:
            smtp_config = apply_validated_overrides(
                smtp_config,
                filter_sentinels(
                    host=host,
                    port=port,
                    username=username,
                    password=password,
                    domain=domain,
                    use_ssl=use_ssl,
                    timeout=timeout,
                    forced_starttls_hosts=forced_starttls_hosts,
                ),
            )
        except ValidationError as exc:
            _fail(exc, "Invalid SMTP override", "Invalid option value", ExitCode.INVALID_ARGUMENT)

        try:
            message = build_text_message(
                from_address=from_address,
                recipients=recipient_list,
                subject=subject,
                body=body,
            )
        except ValueError as exc:
            _fail(exc, "Invalid mail parameters", "Invalid mail parameters", ExitCode.INVALID_ARGUMENT)

        mailer = cli_ctx.services.build_mailer(smtp_config.to_settings())
        try:
            result = asyncio.run(mailer.send_mail_async(message)) if use_async else mailer.send_mail(message)
        except (OSError, aiosmtplib.SMTPException) as exc:
            # connect faults are raised, not returned
            if os.environ.get("DEVELOPMENT_MODE"):
                raise
            _fail(exc, "SMTP connection failed", "Could not connect", ExitCode.SMTP_FAILURE)
        _report(result)


__all__ = ["cli_send_mail", "sanitize_error_message"]
