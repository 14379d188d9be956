"""Tests for trendcast configuration loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from trendcast.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_LOCATION,
    DEFAULT_TIMEOUT_SECONDS,
    TrendcastConfig,
    load_config,
)
from trendcast.core.schemas import Coordinates


def test_load_config_returns_defaults_without_api_key() -> None:
    config = load_config()

    assert config == TrendcastConfig()
    assert config.api_key == ""
    assert config.base_url == DEFAULT_BASE_URL
    assert config.units == "metric"
    assert config.lang == "zh_cn"
    assert config.timeout == DEFAULT_TIMEOUT_SECONDS
    assert config.default_location == DEFAULT_LOCATION == Coordinates(lat=35.41, lon=139.42)


def test_load_config_reads_api_key_from_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("TRENDCAST_API_KEY", "process-key")

    assert load_config().api_key == "process-key"


def test_load_config_strips_api_key_from_mapping() -> None:
    assert load_config(environ={"TRENDCAST_API_KEY": " env-key "}).api_key == "env-key"


def test_load_config_ignores_other_environment_variables() -> None:
    config = load_config(
        environ={
            "TRENDCAST_BASE_URL": "http://forecast.test/data/2.5",
            "TRENDCAST_LANG": "en",
            "TRENDCAST_TIMEOUT": "12.5",
            "TRENDCAST_HOME": "/tmp/trendcast",
        },
    )

    assert config == TrendcastConfig()


def test_injected_config_overrides_endpoint_settings() -> None:
    config = TrendcastConfig(
        api_key="k",
        base_url="http://forecast.test/data/2.5",
        lang="en",
        timeout=2.0,
        default_location={"lat": 31.23, "lon": 121.47},
    )

    assert config.lang == "en"
    assert config.default_location == Coordinates(lat=31.23, lon=121.47)


@pytest.mark.parametrize(
    "settings",
    [
        {"unknown_field": True},
        {"timeout": 0.0},
        {"default_location": {"lat": 120.0, "lon": 0.0}},
    ],
)
def test_invalid_config_raises_validation_error(settings: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        TrendcastConfig.model_validate(settings)


def test_coordinates_reject_out_of_range_values() -> None:
    with pytest.raises(ValueError):
        Coordinates(lat=91.0, lon=0.0)
    with pytest.raises(ValueError):
        Coordinates(lat=0.0, lon=-181.0)
