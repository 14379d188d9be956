"""Typed error hierarchy for forecast fetching and decoding."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ErrorMetadata:
    """Structured metadata describing one failure class."""

    category: str


class TrendcastClientError(RuntimeError):
    """Base error for forecast fetch and transform operations."""

    metadata = ErrorMetadata(category="INTERNAL_ERROR")

    def __init__(
        self,
        *,
        action: str,
        detail: str,
        status_code: int | None = None,
    ) -> None:
        message = f"{action} failed"
        if status_code is not None:
            message = f"{message} with HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.action = action
        self.detail = detail
        self.status_code = status_code

    @property
    def category(self) -> str:
        return self.metadata.category


class ForecastUnreachableError(TrendcastClientError):
    """Forecast endpoint could not be reached."""

    metadata = ErrorMetadata(category="UNREACHABLE")


class ForecastTimeoutError(TrendcastClientError):
    """Forecast request timed out."""

    metadata = ErrorMetadata(category="TIMEOUT")


class ForecastHTTPError(TrendcastClientError):
    """Forecast endpoint answered with a non-success status."""

    metadata = ErrorMetadata(category="HTTP_ERROR")


class ForecastAuthError(ForecastHTTPError):
    """API key missing, invalid, or not permitted."""

    metadata = ErrorMetadata(category="UNAUTHORIZED")


class ForecastDecodeError(TrendcastClientError):
    """Response body is not a decodable forecast payload."""

    metadata = ErrorMetadata(category="DECODE_ERROR")


class IncompleteForecastError(TrendcastClientError):
    """Decoded payload lacks the points or city needed to build a chart."""

    metadata = ErrorMetadata(category="INCOMPLETE")
