"""Forecast endpoint configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .schemas import Coordinates

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_UNITS = "metric"
DEFAULT_LANG = "zh_cn"
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_LOCATION = Coordinates(lat=35.41, lon=139.42)

API_KEY_ENV = "TRENDCAST_API_KEY"


class TrendcastConfig(BaseModel):
    """Settings baked into every forecast request.

    ``timeout`` defaults to the httpx transport default. Everything except the
    API key is set by constructing the config and injecting it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    api_key: StrictStr = ""
    base_url: StrictStr = DEFAULT_BASE_URL
    units: StrictStr = DEFAULT_UNITS
    lang: StrictStr = DEFAULT_LANG
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    default_location: Coordinates = DEFAULT_LOCATION


def load_config(*, environ: Mapping[str, str] | None = None) -> TrendcastConfig:
    """Return default settings with the API key taken from the environment."""
    resolved = os.environ if environ is None else environ
    api_key = resolved.get(API_KEY_ENV)
    if api_key is None:
        return TrendcastConfig()
    return TrendcastConfig(api_key=api_key.strip())
