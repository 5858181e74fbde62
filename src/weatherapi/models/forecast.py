"""Forecast response models.

Only the sections the client reads are modelled; any other provider
fields (``forecast.forecastday``, astro data, ...) are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Condition(BaseModel):
    """Free-text description of the current weather."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    icon: str | None = None
    code: int | None = None


class ForecastLocation(BaseModel):
    """Resolved place the forecast refers to."""

    model_config = ConfigDict(frozen=True)

    name: str
    region: str = ""
    country: str = ""
    lat: float | None = None
    lon: float | None = None
    tz_id: str | None = None
    localtime: str | None = None


class CurrentConditions(BaseModel):
    """Current conditions, in the provider's metric units."""

    model_config = ConfigDict(frozen=True)

    temp_c: float
    feelslike_c: float
    humidity: int
    wind_kph: float
    pressure_mb: float
    condition: Condition
    is_day: int | None = None
    last_updated: str | None = None


class ForecastResponse(BaseModel):
    """Payload of ``/forecast.json``."""

    model_config = ConfigDict(frozen=True)

    location: ForecastLocation
    current: CurrentConditions
    forecast: dict[str, Any] | None = None
