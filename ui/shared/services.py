"""Logged access to the weather client for the screen controllers."""

from __future__ import annotations

from typing import Callable

from weatherapi import (
    Coordinates,
    DeviceLocationService,
    LocationQuery,
    LocationResolver,
    Settings,
    StaticLocationService,
    WeatherAPIClient,
    WeatherFetcher,
    WeatherSnapshot,
)

from .api_logging import log_api_call

ClientFactory = Callable[[], WeatherAPIClient]


class WeatherService:
    """Opens a client per call, so no connection outlives a screen action."""

    def __init__(
        self,
        settings: Settings,
        device: DeviceLocationService | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._settings = settings
        self._device = device if device is not None else StaticLocationService(settings.device_position)
        self._client_factory = client_factory or self._default_client

    def _default_client(self) -> WeatherAPIClient:
        return WeatherAPIClient(
            api_key=self._settings.api_key,
            base_url=self._settings.base_url,
            timeout=self._settings.timeout,
        )

    @log_api_call
    def resolve(self, query: LocationQuery) -> Coordinates:
        with self._client_factory() as api:
            return LocationResolver(api, self._device).resolve(query)

    @log_api_call
    def resolve_from_device(self) -> Coordinates:
        with self._client_factory() as api:
            return LocationResolver(api, self._device).resolve_from_device()

    @log_api_call
    def fetch_current(self, coords: Coordinates) -> WeatherSnapshot:
        with self._client_factory() as api:
            return WeatherFetcher(api).fetch_current(coords)
