"""Resolve several places concurrently with the async client."""

import asyncio

from weatherapi import (
    AsyncLocationResolver,
    AsyncWeatherAPIClient,
    AsyncWeatherFetcher,
    LocationQuery,
    Settings,
    WeatherError,
)

PLACES = [
    LocationQuery(country="USA", state_or_region="Texas"),
    LocationQuery(country="India", state_or_region="Kerala"),
    LocationQuery(country="Norway", state_or_region="Troms"),
]


async def current(resolver: AsyncLocationResolver, fetcher: AsyncWeatherFetcher, query: LocationQuery) -> str:
    try:
        snapshot = await fetcher.fetch_current(await resolver.resolve(query))
    except WeatherError as exc:
        return f"  {query.search_term}: {type(exc).__name__}"
    return f"  {snapshot.place}: {snapshot.temperature_c}°C, {snapshot.condition_text}"


async def main() -> None:
    settings = Settings.load()
    async with AsyncWeatherAPIClient(api_key=settings.api_key, base_url=settings.base_url) as api:
        resolver = AsyncLocationResolver(api)
        fetcher = AsyncWeatherFetcher(api)
        lines = await asyncio.gather(*(current(resolver, fetcher, q) for q in PLACES))
    print("\n".join(lines))


if __name__ == "__main__":
    asyncio.run(main())
