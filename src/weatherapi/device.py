"""Device location service contract."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from weatherapi.models.coordinates import Coordinates


class PermissionStatus(str, Enum):
    """Outcome of a foreground location permission request."""

    GRANTED = "granted"
    DENIED = "denied"


class DeviceLocationService(Protocol):
    """Platform capability that reports where the device is."""

    def request_permission(self) -> PermissionStatus: ...

    def get_current_position(self) -> Coordinates: ...


class StaticLocationService:
    """Location service for hosts without a positioning sensor.

    Reports a fixed, configured position. Permission is denied when no
    position was configured.
    """

    def __init__(self, position: Coordinates | None = None) -> None:
        self._position = position

    def request_permission(self) -> PermissionStatus:
        if self._position is None:
            return PermissionStatus.DENIED
        return PermissionStatus.GRANTED

    def get_current_position(self) -> Coordinates:
        if self._position is None:
            raise RuntimeError("No device position configured")
        return self._position
