"""SmtpConfig stories: defaults, coercion, validation and conversion to settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from smtp_mail.adapters.smtp.config import SmtpConfig, load_smtp_config_from_dict
from smtp_mail.domain import ConfigurationError, SecureSocketMode

# ======================== defaults ========================


@pytest.mark.os_agnostic
def test_default_config_has_empty_host_and_username() -> None:
    config = SmtpConfig()

    assert config.host == ""
    assert config.username == ""
    assert config.password == ""


@pytest.mark.os_agnostic
def test_default_port_is_submission_port() -> None:
    assert SmtpConfig().port == 587


@pytest.mark.os_agnostic
def test_default_timeout_is_thirty_seconds() -> None:
    assert SmtpConfig().timeout == 30.0


@pytest.mark.os_agnostic
def test_default_domain_is_none_and_ssl_is_off() -> None:
    config = SmtpConfig()

    assert config.domain is None
    assert config.use_ssl is False
    assert config.forced_starttls_hosts == []


# ======================== coercion ========================


@pytest.mark.os_agnostic
def test_host_and_username_are_stripped() -> None:
    config = SmtpConfig(host="  smtp.test.com  ", username=" user ")

    assert config.host == "smtp.test.com"
    assert config.username == "user"


@pytest.mark.os_agnostic
def test_none_values_become_empty_strings() -> None:
    config = SmtpConfig.model_validate({"host": None, "username": None, "password": None})

    assert (config.host, config.username, config.password) == ("", "", "")


@pytest.mark.os_agnostic
def test_blank_domain_becomes_none() -> None:
    assert SmtpConfig(domain="   ").domain is None


@pytest.mark.os_agnostic
def test_single_forced_host_string_becomes_a_list() -> None:
    config = SmtpConfig.model_validate({"forced_starttls_hosts": "smtp.sendgrid"})

    assert config.forced_starttls_hosts == ["smtp.sendgrid"]


# ======================== validation ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("port", [0, -1, 65536])
def test_out_of_range_port_is_rejected(port: int) -> None:
    with pytest.raises(ValidationError):
        SmtpConfig(port=port)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("timeout", [0, -5.0])
def test_non_positive_timeout_is_rejected(timeout: float) -> None:
    with pytest.raises(ValidationError, match="timeout must be positive"):
        SmtpConfig(timeout=timeout)


@pytest.mark.os_agnostic
def test_config_is_frozen() -> None:
    config = SmtpConfig(host="smtp.test.com")

    with pytest.raises(ValidationError):
        config.host = "other"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_repr_redacts_password() -> None:
    config = SmtpConfig(host="smtp.test.com", password="s3cret")

    assert "s3cret" not in repr(config)
    assert "[REDACTED]" in repr(config)


@pytest.mark.os_agnostic
def test_repr_shows_empty_password_as_is() -> None:
    assert "password=''" in repr(SmtpConfig())


# ======================== to_settings ========================


@pytest.mark.os_agnostic
def test_to_settings_copies_every_credential_field() -> None:
    config = SmtpConfig(
        host="smtp.test.com",
        port=2525,
        username="user",
        password="pw",
        domain="CORP",
        use_ssl=True,
        timeout=12.0,
    )

    settings = config.to_settings()

    credential = settings.credential
    assert (credential.host, credential.port, credential.username) == ("smtp.test.com", 2525, "user")
    assert credential.password == "pw"
    assert credential.domain == "CORP"
    assert credential.use_ssl is True
    assert settings.timeout == 12.0


@pytest.mark.os_agnostic
def test_to_settings_extends_the_forced_hosts() -> None:
    settings = SmtpConfig(forced_starttls_hosts=["smtp.sendgrid"]).to_settings()

    assert settings.forced_security["smtp.sendgrid"] is SecureSocketMode.STARTTLS
    assert settings.forced_security["smtp.mailtrap"] is SecureSocketMode.STARTTLS


# ======================== loader ========================


@pytest.mark.os_agnostic
def test_loader_reads_the_smtp_section() -> None:
    config = load_smtp_config_from_dict({"smtp": {"host": "smtp.mailtrap.io", "port": 2525, "use_ssl": True}})

    assert config.host == "smtp.mailtrap.io"
    assert config.port == 2525
    assert config.use_ssl is True


@pytest.mark.os_agnostic
def test_loader_without_smtp_section_returns_defaults() -> None:
    assert load_smtp_config_from_dict({"lib_log_rich": {}}) == SmtpConfig()


@pytest.mark.os_agnostic
def test_loader_rejects_a_non_table_smtp_section() -> None:
    with pytest.raises(ConfigurationError, match="must be a table"):
        load_smtp_config_from_dict({"smtp": "smtp.test.com"})


@pytest.mark.os_agnostic
def test_loader_propagates_validation_errors() -> None:
    with pytest.raises(ValidationError):
        load_smtp_config_from_dict({"smtp": {"port": "not-a-port"}})
