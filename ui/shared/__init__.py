"""Shared weather app utilities."""

# --- Constants & formatting ---
from .constants import (
    ACCENT_COLOR,
    APP_TITLE,
    CATEGORY_VISUALS,
    LOCATION_PAGE,
    ROUTE_KEY,
    SCREEN_KEY,
    WEATHER_PAGE,
)
from .formatters import format_humidity, format_pressure, format_temperature, format_wind

# --- Service layer ---
from .services import WeatherService

# --- Screen controllers ---
from .controllers import LocationFormController, RouteParams, ScreenStatus, WeatherScreenController

__all__ = [
    "ACCENT_COLOR",
    "APP_TITLE",
    "CATEGORY_VISUALS",
    "LOCATION_PAGE",
    "LocationFormController",
    "ROUTE_KEY",
    "SCREEN_KEY",
    "RouteParams",
    "ScreenStatus",
    "WEATHER_PAGE",
    "WeatherScreenController",
    "WeatherService",
    "format_humidity",
    "format_pressure",
    "format_temperature",
    "format_wind",
]
