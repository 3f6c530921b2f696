"""Logging setup stories: the ``[lib_log_rich]`` section and runtime start-up.

``init_logging`` itself is exercised through the CLI tests.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from smtp_mail import __init__conf__
from smtp_mail.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "mailer", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "mailer"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_the_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service_and_environment() -> None:
    config = Config({"lib_log_rich": {"service": "relay", "environment": "staging"}}, {})

    runtime_config = _build_runtime_config(config)

    assert runtime_config.service == "relay"
    assert runtime_config.environment == "staging"
