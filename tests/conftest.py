"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy

import pytest

BASE_URL = "https://api.weatherapi.com/v1"
API_KEY = "test-key"


SAMPLE_SEARCH = [
    {
        "id": 2801268,
        "name": "Austin",
        "region": "Texas",
        "country": "United States of America",
        "lat": 30.27,
        "lon": -97.74,
        "url": "austin-texas-united-states-of-america",
    },
    {
        "id": 2801300,
        "name": "Dallas",
        "region": "Texas",
        "country": "United States of America",
        "lat": 32.78,
        "lon": -96.8,
        "url": "dallas-texas-united-states-of-america",
    },
]

SAMPLE_FORECAST = {
    "location": {
        "name": "Austin",
        "region": "Texas",
        "country": "United States of America",
        "lat": 30.27,
        "lon": -97.74,
        "tz_id": "America/Chicago",
        "localtime_epoch": 1745400000,
        "localtime": "2025-04-23 4:20",
    },
    "current": {
        "last_updated": "2025-04-23 04:15",
        "temp_c": 21.1,
        "temp_f": 70.0,
        "is_day": 0,
        "condition": {
            "text": "Partly cloudy",
            "icon": "//cdn.weatherapi.com/weather/64x64/night/116.png",
            "code": 1003,
        },
        "wind_kph": 13.0,
        "pressure_mb": 1012.0,
        "humidity": 78,
        "feelslike_c": 21.4,
    },
    "forecast": {"forecastday": []},
}


def make_forecast(condition: str = "Partly cloudy", **current: object) -> dict:
    """Return a deep copy of SAMPLE_FORECAST with the given overrides."""
    data = copy.deepcopy(SAMPLE_FORECAST)
    data["current"]["condition"]["text"] = condition
    data["current"].update(current)
    return data


@pytest.fixture
def base_url() -> str:
    return BASE_URL
