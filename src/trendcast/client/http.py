"""Blocking HTTP client for the 3-hour forecast endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from trendcast.core.config import TrendcastConfig
from trendcast.core.schemas import Coordinates, ForecastResponse

from .exceptions import (
    ForecastAuthError,
    ForecastDecodeError,
    ForecastHTTPError,
    ForecastTimeoutError,
    ForecastUnreachableError,
    TrendcastClientError,
)

logger = logging.getLogger(__name__)

FORECAST_PATH = "/forecast"


class ForecastClient:
    """Fetch and decode forecasts for one coordinate pair per call.

    Every call blocks until the HTTP exchange completes or fails. Widget hosts
    need a finished result before their snapshot callback returns, so no request
    is left in flight past the method boundary.
    """

    def __init__(
        self,
        config: TrendcastConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or TrendcastConfig()
        self._transport = transport

    @property
    def config(self) -> TrendcastConfig:
        return self._config

    def fetch(self, coordinates: Coordinates) -> ForecastResponse:
        """Return the decoded forecast, or an empty response on any failure."""
        try:
            return self.request_forecast(coordinates)
        except TrendcastClientError as exc:
            logger.warning(
                "forecast fetch for (%s, %s) degraded to empty response [%s]: %s",
                coordinates.lat,
                coordinates.lon,
                exc.category,
                exc,
            )
            return ForecastResponse()

    def request_forecast(self, coordinates: Coordinates) -> ForecastResponse:
        """Fetch and decode a forecast, raising typed errors on failure."""
        action = f"forecast for ({coordinates.lat}, {coordinates.lon})"
        response = self._send_request(self.query_params(coordinates), action=action)
        try:
            payload = response.json()
        except ValueError as exc:
            raise ForecastDecodeError(
                action=action,
                detail="endpoint returned non-JSON response",
            ) from exc

        if not isinstance(payload, dict):
            raise ForecastDecodeError(
                action=action,
                detail="endpoint returned unexpected JSON payload",
            )

        try:
            return ForecastResponse.model_validate(payload)
        except ValidationError as exc:
            raise ForecastDecodeError(action=action, detail=str(exc)) from exc

    def query_params(self, coordinates: Coordinates) -> dict[str, Any]:
        """Build the forecast query string in the order the endpoint documents."""
        return {
            "appid": self._config.api_key,
            "units": self._config.units,
            "lat": coordinates.lat,
            "lon": coordinates.lon,
            "lang": self._config.lang,
        }

    def _send_request(self, params: dict[str, Any], *, action: str) -> httpx.Response:
        logger.debug("requesting %s from %s", action, self._config.base_url)
        try:
            with httpx.Client(
                base_url=self._config.base_url.rstrip("/"),
                timeout=self._config.timeout,
                transport=self._transport,
            ) as client:
                response = client.get(FORECAST_PATH, params=params)
        except httpx.TimeoutException as exc:
            raise ForecastTimeoutError(action=action, detail=str(exc)) from exc
        except httpx.RequestError as exc:
            raise ForecastUnreachableError(action=action, detail=str(exc)) from exc
        except httpx.HTTPError as exc:
            raise TrendcastClientError(action=action, detail=str(exc)) from exc

        if response.is_error:
            detail = _extract_error_detail(response)
            raise _map_http_error(action=action, status_code=response.status_code, detail=detail)
        if not response.content:
            raise ForecastDecodeError(action=action, detail="endpoint returned empty body")
        return response


def _extract_error_detail(response: httpx.Response) -> str:
    """Prefer the upstream `message` field, where the forecast API puts its error text."""
    text = response.text.strip()
    if not text:
        return f"HTTP {response.status_code}"

    try:
        payload = response.json()
    except ValueError:
        return text

    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return text


def _map_http_error(*, action: str, status_code: int, detail: str) -> TrendcastClientError:
    if status_code in {408, 504}:
        return ForecastTimeoutError(action=action, status_code=status_code, detail=detail)

    if status_code in {401, 403}:
        return ForecastAuthError(action=action, status_code=status_code, detail=detail)

    return ForecastHTTPError(action=action, status_code=status_code, detail=detail)
