"""Basic usage examples for the weatherapi client."""

from weatherapi import (
    LocationResolver,
    NotFoundError,
    Settings,
    WeatherAPIClient,
    WeatherFetcher,
    classify,
)


def main() -> None:
    settings = Settings.load()
    with WeatherAPIClient(api_key=settings.api_key, base_url=settings.base_url) as api:
        # Candidate places, in provider order
        print("=== Search: Texas, USA ===")
        for place in api.search("Texas,USA")[:5]:
            print(f"  {place.name}, {place.region}, {place.country} ({place.lat}, {place.lon})")

        try:
            coords = LocationResolver(api).resolve_text("USA", "Texas")
        except NotFoundError:
            print("  No location found.")
            return

        print(f"\n=== Current conditions at {coords.query} ===")
        snapshot = WeatherFetcher(api).fetch_current(coords)
        print(f"  {snapshot.place}")
        print(f"  {snapshot.temperature_c}°C (feels like {snapshot.feels_like_c}°C)")
        print(f"  {snapshot.condition_text} -> {classify(snapshot.condition_text).value}")
        print(f"  Humidity: {snapshot.humidity_pct}%, Wind: {snapshot.wind_kph} km/h")
        print(f"  Pressure: {snapshot.pressure_mb} mb")


if __name__ == "__main__":
    main()
