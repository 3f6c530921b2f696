"""SMTP configuration model and loader.

Provides the SmtpConfig Pydantic model for validated, immutable SMTP
settings and the loader function to create it from configuration
dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from btx_lib_mail import validate_smtp_host
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from smtp_mail.domain.errors import ConfigurationError
from smtp_mail.domain.security import with_forced_hosts
from smtp_mail.domain.settings import Credential, SmtpMailSettings


class SmtpConfig(BaseModel):
    """Validated, immutable ``[smtp]`` configuration.

    Empty ``host`` and ``username`` are accepted; the mailer turns them into
    Failure results at send time.

    Example:
        >>> config = SmtpConfig(host="smtp.example.com", port=2525, username="u")
        >>> config.port
        2525
        >>> config.use_ssl
        False
    """

    model_config = ConfigDict(frozen=True)

    host: str = ""
    port: int = Field(default=587, ge=1, le=65535)
    username: str = ""
    password: str = ""
    domain: str | None = None
    use_ssl: bool = False
    timeout: float = 30.0
    forced_starttls_hosts: list[str] = Field(default_factory=list)

    @field_validator("host", "username", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: Any) -> Any:
        """Strip surrounding whitespace; ``None`` becomes an empty string.

        Examples:
            >>> SmtpConfig._strip_whitespace("  smtp.example.com ")
            'smtp.example.com'
            >>> SmtpConfig._strip_whitespace(None)
            ''
        """
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_none_password(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("domain", mode="before")
    @classmethod
    def _coerce_empty_domain_to_none(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace-only domain as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("forced_starttls_hosts", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> list[str]:
        """Coerce single strings to single-element lists.

        Handles environment variables and .env files that provide single strings
        instead of TOML arrays. Empty strings become empty lists.

        Examples:
            >>> SmtpConfig._coerce_string_to_list("smtp.sendgrid")
            ['smtp.sendgrid']
            >>> SmtpConfig._coerce_string_to_list("")
            []
        """
        if isinstance(v, str):
            return [v] if v.strip() else []
        if isinstance(v, list):
            return cast(list[str], v)
        return []

    @model_validator(mode="after")
    def _validate_config(self) -> SmtpConfig:
        """Reject values that can never work.

        Raises:
            ValueError: When timeout is not positive or the host is malformed.

        Example:
            >>> SmtpConfig(timeout=0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        if self.host:
            validate_smtp_host(self.host)

        return self

    def __repr__(self) -> str:
        """Return string representation with password redacted.

        Example:
            >>> config = SmtpConfig(host="smtp.example.com", password="secret123")
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "password" and value:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"SmtpConfig({', '.join(fields)})"

    def to_settings(self) -> SmtpMailSettings:
        """Convert to the domain settings consumed by SmtpMail.

        Example:
            >>> settings = SmtpConfig(host="smtp.example.com", forced_starttls_hosts=["smtp.example"]).to_settings()
            >>> settings.credential.host
            'smtp.example.com'
            >>> "smtp.example" in settings.forced_security
            True
        """
        credential = Credential(
            host=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            domain=self.domain,
            use_ssl=self.use_ssl,
        )
        return SmtpMailSettings(
            credential=credential,
            forced_security=with_forced_hosts(self.forced_starttls_hosts),
            timeout=self.timeout,
        )


def load_smtp_config_from_dict(config_dict: Mapping[str, Any]) -> SmtpConfig:
    """Load SmtpConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed SmtpConfig
    Pydantic model. Single-parse validation at the boundary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have an 'smtp' section.

    Returns:
        Configured SMTP settings with defaults for missing values.

    Raises:
        ConfigurationError: The smtp section is not a table.
        pydantic.ValidationError: A value in the section is invalid.

    Example:
        >>> cfg = load_smtp_config_from_dict({"smtp": {"host": "smtp.mailtrap.io", "port": 2525}})
        >>> cfg.host, cfg.port
        ('smtp.mailtrap.io', 2525)
        >>> load_smtp_config_from_dict({}).host
        ''
    """
    smtp_section: Any = config_dict.get("smtp", {})

    if not isinstance(smtp_section, Mapping):
        raise ConfigurationError(f"[smtp] must be a table, got {type(smtp_section).__name__}")

    smtp_raw: dict[str, Any] = dict(cast(Mapping[str, Any], smtp_section))
    return SmtpConfig.model_validate(smtp_raw)


__all__ = [
    "SmtpConfig",
    "load_smtp_config_from_dict",
]
