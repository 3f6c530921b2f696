"""Configuration doubles: no files are read and nothing is printed."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..smtp.config import SmtpConfig, load_smtp_config_from_dict


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """An empty Config; every ``[smtp]`` field falls back to its default."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Swallow the display request."""


def load_smtp_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> SmtpConfig:
    """Same validation as production; there is no I/O to replace."""
    return load_smtp_config_from_dict(config_dict)


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_smtp_config_from_dict_in_memory",
]
