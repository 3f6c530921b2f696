"""CLI config stories: display, JSON format, sections, profiles and overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from smtp_mail.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_fails(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_smtp_section_is_shown_as_json(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    config = config_factory({"smtp": {"host": "smtp.test.com", "port": 2525}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "smtp"], obj=inject_config(config)
    )

    assert result.exit_code == 0
    assert "smtp.test.com" in result.stdout
    assert "2525" in result.stdout


@pytest.mark.os_agnostic
def test_set_override_is_visible_in_displayed_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    config = config_factory({"smtp": {"host": "smtp.test.com"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "smtp.host=smtp.mailtrap.io", "config", "--format", "json", "--section", "smtp"],
        obj=inject_config(config),
    )

    assert result.exit_code == 0
    assert "smtp.mailtrap.io" in result.stdout


@pytest.mark.os_agnostic
def test_subcommand_profile_reloads_config_and_keeps_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    from smtp_mail.composition import AppServices, build_production

    captured: list[str | None] = []
    config = config_factory({"smtp": {"host": "smtp.test.com", "port": 587}})

    def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
        captured.append(profile)
        return config

    prod = build_production()
    services = AppServices(
        get_config=_capturing_get_config,
        display_config=prod.display_config,
        load_smtp_config_from_dict=prod.load_smtp_config_from_dict,
        init_logging=prod.init_logging,
        build_mailer=prod.build_mailer,
    )

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "smtp.port=2525", "config", "--profile", "staging", "--format", "json", "--section", "smtp"],
        obj=lambda: services,
    )

    assert result.exit_code == 0
    assert captured == [None, "staging"]
    assert "2525" in result.stdout


@pytest.mark.os_agnostic
def test_default_config_ships_an_smtp_section(clear_config_cache: None) -> None:
    from smtp_mail.adapters.config.loader import get_config

    config = get_config()

    assert config.get("smtp.port", default=None) == 587
    assert config.as_dict()["smtp"]["use_ssl"] is False


@pytest.mark.os_agnostic
def test_path_like_profile_names_are_rejected(clear_config_cache: None) -> None:
    from smtp_mail.adapters.config.loader import get_config

    with pytest.raises(ValueError):
        get_config(profile="../secrets")
