"""weatherapi — Typed Python client for WeatherAPI.com location and forecast lookups."""

from weatherapi.classifier import VisualCategory, classify
from weatherapi.client import AsyncWeatherAPIClient, WeatherAPIClient
from weatherapi.config import Settings
from weatherapi.device import DeviceLocationService, PermissionStatus, StaticLocationService
from weatherapi.exceptions import (
    ConfigurationError,
    LocationUnavailableError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherError,
    WeatherTimeoutError,
)
from weatherapi.fetcher import AsyncWeatherFetcher, WeatherFetcher
from weatherapi.models import Coordinates, LocationQuery, WeatherSnapshot
from weatherapi.resolver import AsyncLocationResolver, LocationResolver

__all__ = [
    "AsyncLocationResolver",
    "AsyncWeatherAPIClient",
    "AsyncWeatherFetcher",
    "ConfigurationError",
    "Coordinates",
    "DeviceLocationService",
    "LocationQuery",
    "LocationResolver",
    "LocationUnavailableError",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "PermissionDeniedError",
    "PermissionStatus",
    "Settings",
    "StaticLocationService",
    "ValidationError",
    "VisualCategory",
    "WeatherAPIClient",
    "WeatherAPIError",
    "WeatherConnectionError",
    "WeatherError",
    "WeatherFetcher",
    "WeatherSnapshot",
    "WeatherTimeoutError",
    "classify",
]

__version__ = "0.1.0"
