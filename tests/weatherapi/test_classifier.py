"""Tests for condition text classification."""

from __future__ import annotations

import pytest

from weatherapi import VisualCategory, classify


class TestClassify:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Sunny", VisualCategory.SUNNY),
            ("Clear skies", VisualCategory.SUNNY),
            ("CLEAR", VisualCategory.SUNNY),
            ("Partly cloudy", VisualCategory.CLOUDY),
            ("Overcast clouds", VisualCategory.CLOUDY),
            ("Patchy light rain", VisualCategory.RAINY),
            ("Moderate or heavy rain shower", VisualCategory.RAINY),
            ("Light snow", VisualCategory.SNOWY),
            ("Blowing snow", VisualCategory.SNOWY),
            ("Mist", VisualCategory.DEFAULT),
            ("Thundery outbreaks possible", VisualCategory.DEFAULT),
        ],
    )
    def test_single_group(self, text: str, expected: VisualCategory) -> None:
        assert classify(text) is expected

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_or_empty(self, text: str | None) -> None:
        assert classify(text) is VisualCategory.DEFAULT

    def test_sunny_beats_cloud(self) -> None:
        assert classify("Clear with a few clouds") is VisualCategory.SUNNY

    def test_cloud_beats_rain(self) -> None:
        assert classify("light rain and clouds") is VisualCategory.CLOUDY

    def test_rain_beats_snow(self) -> None:
        assert classify("Light sleet: rain and snow mixed") is VisualCategory.RAINY

    def test_deterministic(self) -> None:
        assert {classify("Heavy snow") for _ in range(5)} == {VisualCategory.SNOWY}
