"""Shared pytest fixtures for mailer, transport and CLI tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from email.message import EmailMessage
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from smtp_mail.adapters.memory import TransportSpy
    from smtp_mail.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from smtp_mail.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after: the function may have been monkeypatched
    during the test and lost its ``cache_clear``.
    """
    from smtp_mail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_smtp_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"smtp": {"host": "smtp.test.com"}})
            assert config.get("smtp.host") == "smtp.test.com"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def plain_message() -> EmailMessage:
    """A minimal pre-built message; the mailer never looks inside it."""
    message = EmailMessage()
    message["From"] = "sender@test.com"
    message["To"] = "recipient@test.com"
    message["Subject"] = "Hello"
    message.set_content("Hello there")
    return message


@dataclass
class SmtpCliContext:
    """Container for send-mail CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: TransportSpy recording every SMTP session the mailer opened.
    """

    factory: Callable[[], Any]
    spy: TransportSpy


@pytest.fixture
def smtp_cli_context(
    clear_config_cache: None,
) -> Callable[..., SmtpCliContext]:
    """Create send-mail CLI test context with configured factory and spy.

    Takes the ``[smtp]`` section contents and, optionally, a ``fail_on``
    mapping that the spy copies into every recording transport.

    Example:
        def test_send(cli_runner: CliRunner, smtp_cli_context: Callable[..., SmtpCliContext]) -> None:
            ctx = smtp_cli_context({"host": "smtp.test.com", "username": "user"})
            result = cli_runner.invoke(cli, ["send-mail", ...], obj=ctx.factory)
            assert ctx.spy.last.operations[-1] == "close"
    """
    from smtp_mail.adapters.memory import TransportSpy as TransportSpyImpl
    from smtp_mail.composition import AppServices, build_production, build_testing

    def _create(smtp_data: dict[str, Any], fail_on: dict[str, BaseException] | None = None) -> SmtpCliContext:
        spy = TransportSpyImpl(fail_on=dict(fail_on or {}))
        config = Config({"smtp": smtp_data}, {})
        base = build_testing(spy=spy)

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=base.display_config,
            load_smtp_config_from_dict=base.load_smtp_config_from_dict,
            init_logging=build_production().init_logging,
            build_mailer=base.build_mailer,
        )
        return SmtpCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only replaces the I/O boundary (``get_config``), not the Config object itself.
    """
    from smtp_mail.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_smtp_config_from_dict=prod.load_smtp_config_from_dict,
            init_logging=prod.init_logging,
            build_mailer=prod.build_mailer,
        )
        return lambda: test_services

    return _inject
