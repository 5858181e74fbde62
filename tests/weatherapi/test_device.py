"""Tests for the static device location service."""

from __future__ import annotations

import pytest

from weatherapi import Coordinates, PermissionStatus, StaticLocationService


class TestStaticLocationService:
    def test_configured_position(self) -> None:
        position = Coordinates(latitude=51.52, longitude=-0.11)
        service = StaticLocationService(position)
        assert service.request_permission() is PermissionStatus.GRANTED
        assert service.get_current_position() == position

    def test_unconfigured_denies(self) -> None:
        service = StaticLocationService()
        assert service.request_permission() is PermissionStatus.DENIED

    def test_unconfigured_read_fails(self) -> None:
        with pytest.raises(RuntimeError):
            StaticLocationService().get_current_position()
