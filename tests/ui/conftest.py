"""Shared fixtures for weather app tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from weatherapi import Coordinates, PermissionStatus, Settings

# Add ui to path so `shared` is importable
_ui_dir = str(Path(__file__).resolve().parent.parent.parent / "ui")
if _ui_dir not in sys.path:
    sys.path.insert(0, _ui_dir)

LOGGER_NAME = "weather_app.api"


class FakeDevice:
    """Device location service with a scripted permission answer."""

    def __init__(self, status: PermissionStatus = PermissionStatus.GRANTED) -> None:
        self.status = status
        self.position = Coordinates(latitude=48.85, longitude=2.35)
        self.position_reads = 0

    def request_permission(self) -> PermissionStatus:
        return self.status

    def get_current_position(self) -> Coordinates:
        self.position_reads += 1
        return self.position


def _drop_file_handlers(logger: logging.Logger) -> None:
    for h in logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            h.close()
            logger.removeHandler(h)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture(autouse=True)
def api_log(tmp_path):
    """Redirect the module-level API logger to tmp_path; yields the log file path."""
    import shared.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger(LOGGER_NAME)
    _drop_file_handlers(named_logger)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path / "api_calls.log"

    _drop_file_handlers(named_logger)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
