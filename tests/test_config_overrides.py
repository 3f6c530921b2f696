"""``--set SECTION.KEY=VALUE`` stories: parsing, coercion and merging into Config."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from smtp_mail.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_simple_key() -> None:
    assert parse_override("smtp.host=smtp.gmail.com") == ConfigOverride(
        section="smtp", key_path=("host",), value="smtp.gmail.com"
    )


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_value_containing_equals() -> None:
    assert parse_override("smtp.password=a=b").value == "a=b"


@pytest.mark.os_agnostic
def test_parse_override_empty_value() -> None:
    assert parse_override("smtp.domain=").value == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("smtp.host", "must contain '='"),
        ("host=x", "at least one dot"),
        (".host=x", "section name is empty"),
        ("smtp..host=x", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("465", 465),
        ("2.5", 2.5),
        ("null", None),
        ('["smtp.a", "smtp.b"]', ["smtp.a", "smtp.b"]),
        ("smtp.gmail.com", "smtp.gmail.com"),
    ],
)
def test_coerce_value_decodes_json_or_keeps_text(raw: str, expected: object) -> None:
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), (str, int, float, bool, list, dict, type(None)))


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_config() -> None:
    config = Config({"smtp": {"port": 587}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_replaces_and_keeps_siblings() -> None:
    config = Config({"smtp": {"host": "smtp.test.com", "port": 587}}, {})

    result = apply_overrides(config, ("smtp.port=2525", "smtp.use_ssl=true"))

    assert result.get("smtp.port") == 2525
    assert result.get("smtp.use_ssl") is True
    assert result.get("smtp.host") == "smtp.test.com"


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_sections() -> None:
    result = apply_overrides(Config({}, {}), ("smtp.host=smtp.mailtrap.io",))

    assert result.get("smtp.host") == "smtp.mailtrap.io"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_nesting_under_a_scalar() -> None:
    with pytest.raises(ValueError, match="Expected dict"):
        apply_overrides(Config({}, {}), ("smtp.port=1", "smtp.port.inner=2"))
