"""Subcommands registered on the ``smtp-mail`` group by :mod:`..root`."""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .send_mail import cli_send_mail

__all__ = ["cli_config", "cli_info", "cli_send_mail"]
