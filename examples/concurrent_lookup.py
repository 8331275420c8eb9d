"""Look up several cities concurrently with the async client."""

import asyncio

from weatherdash import AsyncWeatherClient, WeatherError
from weatherdash.config import get_settings

CITIES = ["London", "Paris", "Tokyo", "Buenos Aires"]


async def main() -> None:
    async with AsyncWeatherClient.from_settings(get_settings()) as client:
        results = await asyncio.gather(
            *(client.fetch(city) for city in CITIES),
            return_exceptions=True,
        )

    for city, result in zip(CITIES, results):
        if isinstance(result, WeatherError):
            print(f"{city}: failed ({result})")
        elif isinstance(result, BaseException):
            raise result
        else:
            print(f"{city}: {result.temperature}°C, {result.description}")


if __name__ == "__main__":
    asyncio.run(main())
