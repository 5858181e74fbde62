"""Custom exceptions for the weather client."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather client errors."""


class ConfigurationError(WeatherError):
    """Raised when a settings variable holds an unusable value."""


class ValidationError(WeatherError):
    """Raised when a location query is missing its country or state."""


class NotFoundError(WeatherError):
    """Raised when the location search returns no candidates."""


class PermissionDeniedError(WeatherError):
    """Raised when access to the device location is refused."""


class LocationUnavailableError(WeatherError):
    """Raised when the device cannot report its position."""


class NetworkError(WeatherError):
    """Raised on transport failures, error responses and malformed payloads."""


class WeatherConnectionError(NetworkError):
    """Raised when the client cannot connect to the API."""


class WeatherTimeoutError(NetworkError):
    """Raised when a request to the API times out."""


class WeatherAPIError(NetworkError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class MalformedResponseError(NetworkError):
    """Raised when API response data fails model validation."""
