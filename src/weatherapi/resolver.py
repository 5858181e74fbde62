"""Resolve a typed place or the device position to coordinates."""

from __future__ import annotations

from weatherapi.client import AsyncWeatherAPIClient, WeatherAPIClient
from weatherapi.device import DeviceLocationService, PermissionStatus
from weatherapi.exceptions import (
    LocationUnavailableError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from weatherapi.models.coordinates import Coordinates, LocationQuery
from weatherapi.models.search import SearchResult


def _check_query(query: LocationQuery) -> None:
    if not query.is_complete:
        raise ValidationError("Both country and state/region are required")


def _first_match(query: LocationQuery, results: list[SearchResult]) -> Coordinates:
    # Provider order is kept as-is; no re-ranking of candidates.
    if not results:
        raise NotFoundError(f"No location matches {query.search_term!r}")
    return results[0].coordinates


def _device_position(device: DeviceLocationService | None) -> Coordinates:
    if device is None:
        raise PermissionDeniedError("No device location service available")
    if device.request_permission() != PermissionStatus.GRANTED:
        raise PermissionDeniedError("Permission to access location was denied")
    try:
        return device.get_current_position()
    except Exception as exc:
        raise LocationUnavailableError(f"Failed to read device position: {exc}") from exc


class LocationResolver:
    """Turns a country/state query, or the device position, into coordinates.

    Usage:
        with WeatherAPIClient(api_key="...") as api:
            coords = LocationResolver(api).resolve(
                LocationQuery(country="USA", state_or_region="Texas"),
            )
    """

    def __init__(
        self,
        client: WeatherAPIClient,
        device: DeviceLocationService | None = None,
    ) -> None:
        self._client = client
        self._device = device

    def resolve(self, query: LocationQuery) -> Coordinates:
        """Return the coordinates of the first search candidate.

        Raises:
            ValidationError: country or state is blank; nothing is sent.
            NotFoundError: the search returned no candidates.
            NetworkError: transport failure or unusable response.
        """
        _check_query(query)
        results = self._client.search(query.search_term)
        return _first_match(query, results)

    def resolve_text(self, country: str, state_or_region: str) -> Coordinates:
        return self.resolve(LocationQuery(country=country, state_or_region=state_or_region))

    def resolve_from_device(self) -> Coordinates:
        """Read the device position, asking for permission first.

        Raises:
            PermissionDeniedError: the permission request was refused.
            LocationUnavailableError: the position could not be read.
        """
        return _device_position(self._device)


class AsyncLocationResolver:
    """Async counterpart of :class:`LocationResolver`."""

    def __init__(
        self,
        client: AsyncWeatherAPIClient,
        device: DeviceLocationService | None = None,
    ) -> None:
        self._client = client
        self._device = device

    async def resolve(self, query: LocationQuery) -> Coordinates:
        _check_query(query)
        results = await self._client.search(query.search_term)
        return _first_match(query, results)

    async def resolve_text(self, country: str, state_or_region: str) -> Coordinates:
        return await self.resolve(LocationQuery(country=country, state_or_region=state_or_region))

    async def resolve_from_device(self) -> Coordinates:
        return _device_position(self._device)
