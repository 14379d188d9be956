"""Transform decoded forecasts into fixed-size chart series."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, tzinfo

from trendcast.client import ForecastClient, IncompleteForecastError, TrendcastClientError

from .schemas import ChartSeries, Coordinates, ForecastPoint, ForecastResponse

logger = logging.getLogger(__name__)

CHART_WINDOW = 8
HOUR_LABEL_FORMAT = "%H"


class ChartDataBuilder:
    """Fetch a forecast and reduce it to the chart series a widget renders.

    ``build`` never raises for fetch or payload problems; callers check
    ``ChartSeries.available`` to decide between drawing and a failure message.
    Builders hold no per-call state and may be shared across threads.
    """

    def __init__(
        self,
        client: ForecastClient | None = None,
        *,
        tz: tzinfo | None = None,
    ) -> None:
        self._client = client or ForecastClient()
        self._tz = tz

    def build(self, coordinates: Coordinates | None = None) -> ChartSeries:
        """Fetch and transform; ``coordinates`` defaults to the configured location."""
        location = coordinates or self._client.config.default_location
        response = self._client.fetch(location)
        try:
            return build_chart_series(response, tz=self._tz)
        except TrendcastClientError as exc:
            logger.warning(
                "chart data for (%s, %s) unavailable [%s]: %s",
                location.lat,
                location.lon,
                exc.category,
                exc,
            )
            return ChartSeries.empty()


def build_chart_series(
    response: ForecastResponse,
    *,
    tz: tzinfo | None = None,
) -> ChartSeries:
    """Reduce a decoded forecast to the first ``CHART_WINDOW`` points.

    Raises ``IncompleteForecastError`` when the payload lacks points, a city, or
    a full window of points.
    """
    action = "build chart series"
    if not response.points:
        raise IncompleteForecastError(action=action, detail="forecast has no points")
    if response.city is None:
        raise IncompleteForecastError(action=action, detail="forecast has no city")
    if not response.city.name:
        raise IncompleteForecastError(action=action, detail="forecast city has no name")
    if len(response.points) < CHART_WINDOW:
        raise IncompleteForecastError(
            action=action,
            detail=f"expected at least {CHART_WINDOW} points, got {len(response.points)}",
        )

    window: Sequence[ForecastPoint] = response.points[:CHART_WINDOW]
    logger.debug(
        "building chart for %s from %d of %d points",
        response.city.name,
        len(window),
        len(response.points),
    )

    timestamps: list[datetime] = []
    temperatures: list[float] = []
    pop: list[float] = []
    for point in window:
        timestamps.append(point.dt)
        temperatures.append(float(point.temperature))
        pop.insert(0, float(point.pop))

    maximum = max(temperatures, default=0.0)
    minimum = min(temperatures, default=0.0)
    return ChartSeries(
        city=response.city.name,
        max=maximum,
        min=minimum,
        timestamps=tuple(timestamps),
        labels=tuple(format_hour_label(value, tz=tz) for value in timestamps),
        temperatures=tuple(normalize_temperatures(temperatures, minimum, maximum)),
        pop=tuple(pop),
    )


def normalize_temperatures(
    temperatures: Sequence[float],
    minimum: float,
    maximum: float,
) -> list[float]:
    """Rescale into the open interval (0, 1); a flat series maps to 0.5."""
    spread = maximum - minimum + 2.0
    return [(value - minimum + 1.0) / spread for value in temperatures]


def format_hour_label(value: datetime, *, tz: tzinfo | None = None) -> str:
    """Two-digit hour of ``value`` in ``tz``, or in the local zone when omitted."""
    return value.astimezone(tz).strftime(HOUR_LABEL_FORMAT)
