"""Weather data models."""

from weatherapi.models.coordinates import Coordinates, LocationQuery
from weatherapi.models.forecast import (
    Condition,
    CurrentConditions,
    ForecastLocation,
    ForecastResponse,
)
from weatherapi.models.search import SearchResult
from weatherapi.models.snapshot import WeatherSnapshot

__all__ = [
    "Condition",
    "Coordinates",
    "CurrentConditions",
    "ForecastLocation",
    "ForecastResponse",
    "LocationQuery",
    "SearchResult",
    "WeatherSnapshot",
]
