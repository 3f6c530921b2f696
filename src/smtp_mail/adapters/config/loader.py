"""Read the layered ``smtp_mail`` configuration.

Layers, lowest first: the bundled ``defaultconfig.toml``, app, host and
user files, ``.env``, then environment variables. lib_layered_config does
the discovery and merging; this module pins the vendor/app/slug identifiers
and caches one result per profile.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from smtp_mail import __init__conf__

#: Configuration shipped with the package; every key has a value here.
DEFAULT_CONFIG_PATH: Path = Path(__file__).with_name("defaultconfig.toml")


def get_default_config_path() -> Path:
    """Return the bundled defaults file.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return DEFAULT_CONFIG_PATH


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, cached per ``(profile, start_dir)``.

    Args:
        profile: Named profile such as ``"mailtrap"``; adds
            ``profile/<name>/`` to every file layer.
        start_dir: Where ``.env`` discovery starts; defaults to the cwd.

    Raises:
        ValueError: ``profile`` is empty, too long, or contains path
            separators.

    Example:
        >>> get_config().get("smtp.port", default=None)
        587
        >>> get_config(profile="../secrets")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../secrets
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "get_config",
    "get_default_config_path",
]
