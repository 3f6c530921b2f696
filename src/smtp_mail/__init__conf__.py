"""Static package metadata surfaced to CLI commands and documentation.

Keep the version in sync with ``pyproject.toml``.
"""

from __future__ import annotations

name = "smtp_mail"
title = "Send pre-built email messages over SMTP with uniform Success/Failure results"
version = "1.0.0"
author = "smtp_mail contributors"
shell_command = "smtp-mail"

# Identifiers used by lib_layered_config to locate configuration files
LAYEREDCONF_VENDOR: str = "smtp_mail"
LAYEREDCONF_APP: str = "smtp_mail"
LAYEREDCONF_SLUG: str = "smtp-mail"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for smtp_mail:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
