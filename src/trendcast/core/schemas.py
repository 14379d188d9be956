"""Schemas for forecast payloads and chart-ready series."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator

Latitude = Annotated[float, Field(ge=-90.0, le=90.0)]
Longitude = Annotated[float, Field(ge=-180.0, le=180.0)]
Probability = Annotated[float, Field(ge=0.0, le=1.0)]


class Coordinates(BaseModel):
    """Latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    lat: Latitude
    lon: Longitude


class PayloadModel(BaseModel):
    """Base model for upstream JSON payloads.

    Upstream responses carry more fields than are consumed here, so unknown keys
    are ignored and numeric values are coerced leniently.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class ForecastMain(PayloadModel):
    temp: float


class ForecastPoint(PayloadModel):
    """One 3-hour forecast step."""

    dt: datetime
    main: ForecastMain
    pop: Probability

    @field_validator("dt")
    @classmethod
    def validate_dt(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def temperature(self) -> float:
        return self.main.temp


class CityCoord(PayloadModel):
    lat: float = 0.0
    lon: float = 0.0


class CityInfo(PayloadModel):
    id: int
    name: str
    coord: CityCoord
    country: str


class ForecastResponse(PayloadModel):
    """Decoded forecast payload; every field may be absent."""

    cod: str | None = None
    message: int | None = None
    cnt: int | None = None
    points: list[ForecastPoint] | None = Field(default=None, alias="list")
    city: CityInfo | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.cod is None
            and self.message is None
            and self.cnt is None
            and self.points is None
            and self.city is None
        )


class ChartSeries(BaseModel):
    """Chart-ready forecast series.

    ``city == ""`` marks the failure sentinel: every sequence is empty and both
    ``max`` and ``min`` are zero. Otherwise all sequences share the same length.
    ``pop`` runs in reverse chronological order relative to the other sequences.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    city: StrictStr = ""
    max: StrictFloat = 0.0
    min: StrictFloat = 0.0
    timestamps: tuple[datetime, ...] = ()
    labels: tuple[StrictStr, ...] = ()
    temperatures: tuple[StrictFloat, ...] = ()
    pop: tuple[StrictFloat, ...] = ()

    @classmethod
    def empty(cls) -> ChartSeries:
        """Return the failure sentinel."""
        return cls()

    @property
    def available(self) -> bool:
        return self.city != ""
