"""Weather snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from weatherapi.models.forecast import ForecastResponse


class WeatherSnapshot(BaseModel):
    """Current conditions for one place, as shown on the results screen."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    region: str
    country: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_kph: float
    pressure_mb: float
    condition_text: str

    @classmethod
    def from_forecast(cls, response: ForecastResponse) -> WeatherSnapshot:
        """Copy the displayed fields out of a forecast response, unconverted."""
        location = response.location
        current = response.current
        return cls(
            location_name=location.name,
            region=location.region,
            country=location.country,
            temperature_c=current.temp_c,
            feels_like_c=current.feelslike_c,
            humidity_pct=current.humidity,
            wind_kph=current.wind_kph,
            pressure_mb=current.pressure_mb,
            condition_text=current.condition.text,
        )

    @property
    def place(self) -> str:
        """``name, region, country`` line, skipping blank parts."""
        return ", ".join(p for p in (self.location_name, self.region, self.country) if p)
