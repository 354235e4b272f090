"""Tests for core/config.py — TracerConfig and TracerConfig.from_env()."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from wavefront_opentracing.core.config import TracerConfig, parse_tag_list
from wavefront_opentracing.core.exceptions import ConfigurationError

_ENV_VARS = (
    "WAVEFRONT_APPLICATION",
    "WAVEFRONT_SERVICE",
    "WAVEFRONT_GLOBAL_TAGS",
    "WAVEFRONT_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# parse_tag_list
# ---------------------------------------------------------------------------


def test_parse_tag_list() -> None:
    assert parse_tag_list("env=prod, region = us ,") == {"env": "prod", "region": "us"}


def test_parse_tag_list_empty() -> None:
    assert parse_tag_list("") == {}


def test_parse_tag_list_allows_empty_value() -> None:
    assert parse_tag_list("flag=") == {"flag": ""}


@pytest.mark.parametrize("raw", ["novalue", "=value", "ok=1,broken"])
def test_parse_tag_list_rejects_malformed(raw: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        parse_tag_list(raw)
    assert exc_info.value.code == "INVALID_TAG"


# ---------------------------------------------------------------------------
# span_tags
# ---------------------------------------------------------------------------


def test_span_tags_defaults_empty() -> None:
    assert TracerConfig().span_tags() == {}


def test_span_tags_application_and_service_win() -> None:
    config = TracerConfig(
        application="shop",
        service="cart",
        global_tags={"application": "other", "env": "prod"},
    )
    assert config.span_tags() == {"application": "shop", "service": "cart", "env": "prod"}


def test_invalid_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        TracerConfig(log_level="TRACE")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# from_env()
# ---------------------------------------------------------------------------


def test_from_env_defaults_when_not_set(clean_env: pytest.MonkeyPatch) -> None:
    config = TracerConfig.from_env()
    assert config == TracerConfig()
    assert config.log_level == "INFO"


def test_from_env_reads_all(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("WAVEFRONT_APPLICATION", "shop")
    clean_env.setenv("WAVEFRONT_SERVICE", "cart")
    clean_env.setenv("WAVEFRONT_GLOBAL_TAGS", "env=prod,region=us")
    clean_env.setenv("WAVEFRONT_LOG_LEVEL", "debug")
    config = TracerConfig.from_env()
    assert config.application == "shop"
    assert config.service == "cart"
    assert config.global_tags == {"env": "prod", "region": "us"}
    assert config.log_level == "DEBUG"


def test_from_env_ignores_empty_values(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("WAVEFRONT_APPLICATION", "")
    assert TracerConfig.from_env().application is None


def test_from_env_malformed_tags(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("WAVEFRONT_GLOBAL_TAGS", "broken")
    with pytest.raises(ConfigurationError):
        TracerConfig.from_env()
