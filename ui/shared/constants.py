"""Shared constants for the weather app."""

from __future__ import annotations

from weatherapi.classifier import VisualCategory

APP_TITLE = "Weather App"
ACCENT_COLOR = "#6200ee"

# Illustration shown for each condition category
CATEGORY_VISUALS: dict[VisualCategory, str] = {
    VisualCategory.SUNNY: "☀️",
    VisualCategory.CLOUDY: "☁️",
    VisualCategory.RAINY: "\U0001f327️",
    VisualCategory.SNOWY: "❄️",
    VisualCategory.DEFAULT: "\U0001f321️",
}

ROUTE_KEY = "route"
SCREEN_KEY = "weather_screen"
WEATHER_PAGE = "pages/1_Weather.py"
LOCATION_PAGE = "app.py"
