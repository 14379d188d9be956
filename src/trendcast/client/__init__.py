"""Forecast endpoint client and its error types."""

from .exceptions import (
    ForecastAuthError,
    ForecastDecodeError,
    ForecastHTTPError,
    ForecastTimeoutError,
    ForecastUnreachableError,
    IncompleteForecastError,
    TrendcastClientError,
)
from .http import FORECAST_PATH, ForecastClient

__all__ = [
    "FORECAST_PATH",
    "ForecastAuthError",
    "ForecastClient",
    "ForecastDecodeError",
    "ForecastHTTPError",
    "ForecastTimeoutError",
    "ForecastUnreachableError",
    "IncompleteForecastError",
    "TrendcastClientError",
]
