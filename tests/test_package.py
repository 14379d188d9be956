"""Tests for top-level package exports."""

from __future__ import annotations

import pytest

import trendcast
from trendcast.client import ForecastClient
from trendcast.core.chart import ChartDataBuilder
from trendcast.core.schemas import ChartSeries, Coordinates


def test_lazy_exports_resolve_to_implementations() -> None:
    assert trendcast.ChartDataBuilder is ChartDataBuilder
    assert trendcast.ForecastClient is ForecastClient
    assert trendcast.ChartSeries is ChartSeries
    assert trendcast.Coordinates is Coordinates
    assert trendcast.__version__ == "0.1.0"


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        trendcast.Widget  # noqa: B018
