"""Per-screen state and actions, kept free of any Streamlit dependency.

A controller is created when its screen is shown and dropped when the user
navigates away; nothing here is shared between screens.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from weatherapi import Coordinates, LocationQuery, VisualCategory, WeatherError, WeatherSnapshot, classify

from .api_logging import log_service_call
from .messages import MISSING_FIELDS, NO_WEATHER_DATA, form_error_message, weather_error_message
from .services import WeatherService


@dataclass(frozen=True)
class RouteParams:
    """The only value passed from the form screen to the results screen."""

    lat: float | None = None
    lon: float | None = None
    use_current_location: bool = False

    @property
    def coordinates(self) -> Coordinates | None:
        if self.lat is None or self.lon is None:
            return None
        return Coordinates(latitude=self.lat, longitude=self.lon)


class ScreenStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


class LocationFormController:
    """State of the country / state-or-region form."""

    def __init__(self, service: WeatherService) -> None:
        self._service = service
        self.country = ""
        self.state = ""
        self.loading = False
        self.error = ""

    @log_service_call
    def submit(self) -> RouteParams | None:
        """Resolve the typed place.

        Returns the route to the results screen, or None with ``error`` set.
        """
        query = LocationQuery(country=self.country, state_or_region=self.state)
        if not query.is_complete:
            self.error = MISSING_FIELDS
            return None

        self.loading = True
        self.error = ""
        try:
            coords = self._service.resolve(query)
        except WeatherError as exc:
            self.error = form_error_message(exc)
            return None
        finally:
            self.loading = False
        return RouteParams(lat=coords.latitude, lon=coords.longitude)

    def use_current_location(self) -> RouteParams:
        return RouteParams(use_current_location=True)


class WeatherScreenController:
    """State of the results screen: loading flag, error text, and the snapshot.

    ``load`` may be called again for a refresh; whichever call finishes last
    decides what is shown.
    """

    def __init__(self, params: RouteParams | None, service: WeatherService) -> None:
        self._params = params or RouteParams()
        self._service = service
        self.loading = True
        self.error = ""
        self.snapshot: WeatherSnapshot | None = None
        self.category: VisualCategory | None = None

    @property
    def status(self) -> ScreenStatus:
        if self.loading:
            return ScreenStatus.LOADING
        if self.error:
            return ScreenStatus.ERROR
        if self.snapshot is None:
            return ScreenStatus.EMPTY
        return ScreenStatus.READY

    @property
    def empty_message(self) -> str:
        return NO_WEATHER_DATA

    def _coordinates(self) -> Coordinates | None:
        if self._params.use_current_location:
            return self._service.resolve_from_device()
        return self._params.coordinates

    @log_service_call
    def load(self) -> None:
        """Fetch current conditions; failures end up in ``error``."""
        self.loading = True
        try:
            coords = self._coordinates()
            if coords is None:
                self.snapshot = None
                self.category = None
                self.error = ""
                return
            snapshot = self._service.fetch_current(coords)
        except WeatherError as exc:
            self.error = weather_error_message(exc)
        else:
            self.snapshot = snapshot
            self.category = classify(snapshot.condition_text)
            self.error = ""
        finally:
            self.loading = False

    def refresh(self) -> None:
        self.load()
