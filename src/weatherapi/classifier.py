"""Map free-text weather conditions to a display category."""

from __future__ import annotations

from enum import Enum


class VisualCategory(str, Enum):
    """Display buckets used to pick an illustration for current conditions."""

    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    DEFAULT = "default"


# Checked in order; the first group with a keyword in the text wins.
KEYWORD_GROUPS: tuple[tuple[tuple[str, ...], VisualCategory], ...] = (
    (("sunny", "clear"), VisualCategory.SUNNY),
    (("cloud",), VisualCategory.CLOUDY),
    (("rain",), VisualCategory.RAINY),
    (("snow",), VisualCategory.SNOWY),
)


def classify(condition_text: str | None) -> VisualCategory:
    """Return the visual category for a condition description.

    Matching is a case-insensitive substring test. Missing or empty text
    falls through to ``VisualCategory.DEFAULT``.
    """
    if not condition_text:
        return VisualCategory.DEFAULT
    text = condition_text.lower()
    for keywords, category in KEYWORD_GROUPS:
        if any(keyword in text for keyword in keywords):
            return category
    return VisualCategory.DEFAULT
