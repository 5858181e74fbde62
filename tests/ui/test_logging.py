"""Tests for shared/api_logging.py — decorators and file logging."""

from __future__ import annotations

import logging

import pytest

from shared.api_logging import log_api_call, log_service_call
from weatherapi import NetworkError


class _FakeService:
    """Minimal class to test logging decorators."""

    @log_api_call
    def lookup(self, term: str) -> tuple[float, float]:
        return (30.27, -97.74)

    @log_api_call
    def lookup_failing(self, term: str) -> None:
        try:
            raise ConnectionResetError("socket closed")
        except ConnectionResetError as exc:
            raise NetworkError("search failed") from exc

    @log_service_call
    def submit(self, fields: list) -> dict:
        return {"fields": len(fields)}

    @log_service_call
    def submit_failing(self) -> None:
        raise RuntimeError("service error")


@pytest.fixture
def fake_service():
    return _FakeService()


class TestLogApiCall:
    def test_returns_result(self, fake_service):
        assert fake_service.lookup("Texas,USA") == (30.27, -97.74)

    def test_logs_call_and_ok(self, fake_service, api_log):
        fake_service.lookup("Texas,USA")
        content = api_log.read_text()
        assert "CALL: _FakeService.lookup('Texas,USA')" in content
        assert "OK: _FakeService.lookup('Texas,USA') -> (30.27, -97.74)" in content

    def test_logs_failure_with_cause(self, fake_service, api_log):
        with pytest.raises(NetworkError, match="search failed"):
            fake_service.lookup_failing("Texas,USA")
        content = api_log.read_text()
        assert "FAIL: _FakeService.lookup_failing('Texas,USA')" in content
        assert "NetworkError: search failed" in content
        assert "caused by ConnectionResetError: socket closed" in content

    def test_preserves_function_name(self, fake_service):
        assert fake_service.lookup.__name__ == "lookup"


class TestLogServiceCall:
    def test_returns_result(self, fake_service):
        assert fake_service.submit([1, 2, 3]) == {"fields": 3}

    def test_logs_service_call(self, fake_service, api_log):
        fake_service.submit([1, 2])
        content = api_log.read_text()
        assert "SERVICE CALL: _FakeService.submit" in content
        assert "SERVICE OK: _FakeService.submit" in content

    def test_logs_service_failure(self, fake_service, api_log):
        with pytest.raises(RuntimeError, match="service error"):
            fake_service.submit_failing()
        content = api_log.read_text()
        assert "SERVICE FAIL: _FakeService.submit_failing" in content
        assert "RuntimeError" in content

    def test_creates_log_directory(self, tmp_path):
        """Log directory is created on first use."""
        import shared.api_logging as mod

        new_dir = tmp_path / "nested" / "logs"
        mod._LOG_DIR = str(new_dir)
        mod._LOG_FILE = str(new_dir / "api_calls.log")
        mod._logger = None

        named_logger = logging.getLogger(mod.LOGGER_NAME)
        named_logger.handlers.clear()

        _FakeService().submit([])

        assert new_dir.exists()
        assert (new_dir / "api_calls.log").exists()

    def test_writes_file_when_other_handler_attached(self, api_log):
        """An unrelated handler on the logger does not suppress the file handler."""
        import shared.api_logging as mod

        other = logging.NullHandler()
        named_logger = logging.getLogger(mod.LOGGER_NAME)
        named_logger.addHandler(other)
        try:
            _FakeService().submit([1])
        finally:
            named_logger.removeHandler(other)

        assert "SERVICE OK: _FakeService.submit" in api_log.read_text()
