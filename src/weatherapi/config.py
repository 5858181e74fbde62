"""Environment-driven settings for the weather client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from weatherapi._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from weatherapi.exceptions import ConfigurationError
from weatherapi.models.coordinates import Coordinates


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc


def _optional_float(name: str) -> float | None:
    value = os.getenv(name, "").strip()
    return _parse_float(name, value) if value else None


@dataclass(frozen=True)
class Settings:
    """Client configuration.

    Values come from the process environment, with a ``.env`` file in the
    working directory filling in anything unset.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    device_latitude: float | None = None
    device_longitude: float | None = None

    @classmethod
    def load(cls) -> Settings:
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            api_key=os.getenv("WEATHERAPI_KEY", ""),
            base_url=os.getenv("WEATHERAPI_BASE_URL", DEFAULT_BASE_URL),
            timeout=_parse_float("WEATHERAPI_TIMEOUT", os.getenv("WEATHERAPI_TIMEOUT", str(DEFAULT_TIMEOUT))),
            device_latitude=_optional_float("WEATHER_DEVICE_LAT"),
            device_longitude=_optional_float("WEATHER_DEVICE_LON"),
        )

    @property
    def device_position(self) -> Coordinates | None:
        """Configured fixed device position, if both parts are set."""
        if self.device_latitude is None or self.device_longitude is None:
            return None
        return Coordinates(latitude=self.device_latitude, longitude=self.device_longitude)
