"""``--set SECTION.KEY=VALUE`` overrides layered on top of a loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values an override string can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` argument split into section, key path, and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The value is everything after the first ``=`` and is decoded with
    :func:`coerce_value`.

    Raises:
        ValueError: No ``=``, no dot in the key, or an empty path component.

    Examples:
        >>> override = parse_override("smtp.port=2525")
        >>> override.section, override.key_path, override.value
        ('smtp', ('port',), 2525)

        >>> parse_override("smtp.host=smtp.mailtrap.io").value
        'smtp.mailtrap.io'

        >>> parse_override("smtp")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'smtp': must contain '='
    """
    path_part, sep, value_str = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("465")
        465
        >>> coerce_value('["smtp.sendgrid", "smtp.postmark"]')
        ['smtp.sendgrid', 'smtp.postmark']
        >>> coerce_value("smtp.gmail.com")
        'smtp.gmail.com'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate dicts.

    Raises:
        ValueError: An intermediate key already holds a non-dict value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="smtp", key_path=("use_ssl",), value=True))
        >>> tree
        {'smtp': {'use_ssl': True}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    Raises:
        ValueError: Any override string is malformed.

    Examples:
        >>> cfg = Config({"smtp": {"port": 587}}, {})
        >>> apply_overrides(cfg, ("smtp.port=2525",))["smtp"]["port"]
        2525
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
