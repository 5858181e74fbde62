"""Location query and coordinate models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocationQuery(BaseModel):
    """Free-text country and state/region typed by the user."""

    model_config = ConfigDict(frozen=True)

    country: str = ""
    state_or_region: str = ""

    @property
    def is_complete(self) -> bool:
        """True when both fields hold something other than whitespace."""
        return bool(self.country.strip()) and bool(self.state_or_region.strip())

    @property
    def search_term(self) -> str:
        """Search term in the ``state,country`` form the API expects."""
        return f"{self.state_or_region.strip()},{self.country.strip()}"


class Coordinates(BaseModel):
    """A latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    @property
    def query(self) -> str:
        """Coordinates as a ``lat,lon`` query term."""
        return f"{self.latitude},{self.longitude}"
