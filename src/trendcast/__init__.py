"""trendcast package."""

from typing import Any

__all__ = ["ChartDataBuilder", "ChartSeries", "Coordinates", "ForecastClient", "__version__"]
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    if name == "ChartDataBuilder":
        from .core.chart import ChartDataBuilder

        return ChartDataBuilder
    if name == "ForecastClient":
        from .client import ForecastClient

        return ForecastClient
    if name in {"ChartSeries", "Coordinates"}:
        from .core import schemas

        return getattr(schemas, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
