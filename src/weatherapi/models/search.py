"""Location search result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weatherapi.models.coordinates import Coordinates


class SearchResult(BaseModel):
    """One candidate location returned by ``/search.json``."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    region: str | None = None
    country: str | None = None
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    url: str | None = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.lat, longitude=self.lon)
