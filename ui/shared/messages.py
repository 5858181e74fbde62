"""User-facing error messages, one per error category."""

from __future__ import annotations

from weatherapi.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    WeatherError,
)

MISSING_FIELDS = "Please enter both country and state"
LOCATION_NOT_FOUND = "Location not found. Please try again."
PERMISSION_DENIED = "Permission to access location was denied"
LOCATION_FAILED = "Failed to fetch location. Please try again."
WEATHER_FAILED = "Failed to fetch weather data"
NO_WEATHER_DATA = "No weather data available"


def form_error_message(exc: WeatherError) -> str:
    """Message shown on the location form for a failed submit."""
    if isinstance(exc, ValidationError):
        return MISSING_FIELDS
    if isinstance(exc, NotFoundError):
        return LOCATION_NOT_FOUND
    if isinstance(exc, PermissionDeniedError):
        return PERMISSION_DENIED
    return LOCATION_FAILED


def weather_error_message(exc: WeatherError) -> str:
    """Message shown on the results screen for a failed load."""
    if isinstance(exc, PermissionDeniedError):
        return PERMISSION_DENIED
    return WEATHER_FAILED
