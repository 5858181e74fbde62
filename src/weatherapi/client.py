"""Public client classes for the WeatherAPI.com endpoints."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter

from weatherapi._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from weatherapi._params import build_query_params
from weatherapi.exceptions import MalformedResponseError
from weatherapi.models.forecast import ForecastResponse
from weatherapi.models.search import SearchResult

T = TypeVar("T")


def _validate(model_type: Any, data: Any, label: str) -> T:
    """Validate raw JSON against a Pydantic type."""
    try:
        adapter: TypeAdapter[T] = TypeAdapter(model_type)
        return adapter.validate_python(data)
    except Exception as exc:
        raise MalformedResponseError(f"Failed to validate {label} response: {exc}") from exc


def _search_params(q: str) -> list[tuple[str, str]]:
    return build_query_params(q=q)


def _forecast_params(q: str, days: int, aqi: bool, alerts: bool) -> list[tuple[str, str]]:
    return build_query_params(q=q, days=days, aqi=aqi, alerts=alerts)


class WeatherAPIClient:
    """Synchronous client for the WeatherAPI.com endpoints.

    Usage:
        api = WeatherAPIClient(api_key="...")
        places = api.search("Texas,USA")
        api.close()

        # Or as a context manager:
        with WeatherAPIClient(api_key="...") as api:
            response = api.forecast("31.0,-100.0")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(api_key=api_key, base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherAPIClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def search(self, q: str) -> list[SearchResult]:
        """Search locations matching a free-text term, in provider order."""
        data = self._transport.get("/search.json", _search_params(q))
        return _validate(list[SearchResult], data, "search")

    def forecast(
        self,
        q: str,
        days: int = 1,
        aqi: bool = False,
        alerts: bool = False,
    ) -> ForecastResponse:
        """Get current conditions and a forecast window for a place."""
        data = self._transport.get("/forecast.json", _forecast_params(q, days, aqi, alerts))
        return _validate(ForecastResponse, data, "forecast")


class AsyncWeatherAPIClient:
    """Asynchronous client for the WeatherAPI.com endpoints.

    Usage:
        async with AsyncWeatherAPIClient(api_key="...") as api:
            places = await api.search("Texas,USA")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(api_key=api_key, base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherAPIClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def search(self, q: str) -> list[SearchResult]:
        """Search locations matching a free-text term, in provider order."""
        data = await self._transport.get("/search.json", _search_params(q))
        return _validate(list[SearchResult], data, "search")

    async def forecast(
        self,
        q: str,
        days: int = 1,
        aqi: bool = False,
        alerts: bool = False,
    ) -> ForecastResponse:
        """Get current conditions and a forecast window for a place."""
        data = await self._transport.get("/forecast.json", _forecast_params(q, days, aqi, alerts))
        return _validate(ForecastResponse, data, "forecast")
