"""Fetch current conditions for a pair of coordinates."""

from __future__ import annotations

from weatherapi.client import AsyncWeatherAPIClient, WeatherAPIClient
from weatherapi.models.coordinates import Coordinates
from weatherapi.models.snapshot import WeatherSnapshot

# One-day window, no air quality or alert data.
FORECAST_DAYS = 1


class WeatherFetcher:
    """Stateless wrapper over the forecast endpoint.

    Each call issues exactly one request; calling it again with the same
    coordinates (a manual refresh) gives an independent snapshot.
    """

    def __init__(self, client: WeatherAPIClient) -> None:
        self._client = client

    def fetch_current(self, coords: Coordinates) -> WeatherSnapshot:
        """Return current conditions at ``coords``.

        Raises:
            NetworkError: transport failure, error status, or a response
                missing its ``location`` or ``current`` section.
        """
        response = self._client.forecast(coords.query, days=FORECAST_DAYS, aqi=False, alerts=False)
        return WeatherSnapshot.from_forecast(response)


class AsyncWeatherFetcher:
    """Async counterpart of :class:`WeatherFetcher`."""

    def __init__(self, client: AsyncWeatherAPIClient) -> None:
        self._client = client

    async def fetch_current(self, coords: Coordinates) -> WeatherSnapshot:
        response = await self._client.forecast(
            coords.query, days=FORECAST_DAYS, aqi=False, alerts=False,
        )
        return WeatherSnapshot.from_forecast(response)
