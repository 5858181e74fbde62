"""Formatting helpers for the weather display."""

from __future__ import annotations


def format_temperature(celsius: float | None) -> str:
    """Format a temperature as '21.5°C' or '\u2014' if None."""
    if celsius is None:
        return "\u2014"
    return f"{celsius:g}°C"


def format_humidity(pct: int | None) -> str:
    if pct is None:
        return "\u2014"
    return f"{pct}%"


def format_wind(kph: float | None) -> str:
    if kph is None:
        return "\u2014"
    return f"{kph:g} km/h"


def format_pressure(mb: float | None) -> str:
    if mb is None:
        return "\u2014"
    return f"{mb:g} mb"
