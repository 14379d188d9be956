"""Core types and transforms for trendcast."""

from .schemas import (
    ChartSeries,
    CityCoord,
    CityInfo,
    Coordinates,
    ForecastMain,
    ForecastPoint,
    ForecastResponse,
)

__all__ = [
    "ChartSeries",
    "CityCoord",
    "CityInfo",
    "Coordinates",
    "ForecastMain",
    "ForecastPoint",
    "ForecastResponse",
]
