"""Query parameter builder for WeatherAPI endpoints."""

from __future__ import annotations

from typing import Any


def _format_value(value: Any) -> str:
    # The API spells boolean switches (aqi, alerts) as yes/no.
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    None values are dropped and booleans become ``yes``/``no``.

    Args:
        **kwargs: Keyword arguments where keys are parameter names.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, _format_value(value)))
    return params
