"""Tests for query parameter building."""

from __future__ import annotations

from weatherapi._params import build_query_params


class TestBuildQueryParams:
    def test_plain_values(self) -> None:
        params = build_query_params(q="Texas,USA", days=1)
        assert params == [("q", "Texas,USA"), ("days", "1")]

    def test_none_skipped(self) -> None:
        params = build_query_params(q="1.0,2.0", days=None)
        assert params == [("q", "1.0,2.0")]

    def test_booleans_as_yes_no(self) -> None:
        params = build_query_params(aqi=False, alerts=True)
        assert params == [("aqi", "no"), ("alerts", "yes")]

    def test_empty(self) -> None:
        assert build_query_params() == []
