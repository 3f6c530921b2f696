"""POSIX-conventional exit codes for CLI error paths.

Values follow sysexits.h and errno conventions so scripts can tell a
rejected login from an unreachable server without parsing output.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised through ``SystemExit`` by CLI commands.

    * 0–1: generic success / failure
    * 22: EINVAL
    * 69: EX_UNAVAILABLE (sysexits.h)
    * 77: EX_NOPERM (sysexits.h)
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> int(ExitCode.SMTP_FAILURE)
        69
        >>> ExitCode.AUTH_FAILURE
        <ExitCode.AUTH_FAILURE: 77>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    SMTP_FAILURE = 69
    AUTH_FAILURE = 77
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
