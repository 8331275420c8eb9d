"""Public client classes for current-conditions lookups."""

from __future__ import annotations

from weatherdash._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from weatherdash._logging import log_fetch, log_fetch_async
from weatherdash._mapper import map_response
from weatherdash.config import Settings
from weatherdash.models.provider import Provider
from weatherdash.models.reading import WeatherReading
from weatherdash.models.units import UnitSystem


class WeatherClient:
    """Synchronous weather client.

    Usage:
        client = WeatherClient(api_key="...")
        reading = client.fetch("London")
        client.close()

        # Or as a context manager:
        with WeatherClient(api_key="...", provider=Provider.OPENWEATHERMAP) as client:
            reading = client.fetch("Paris", UnitSystem.IMPERIAL)
    """

    def __init__(
        self,
        api_key: str,
        provider: Provider = Provider.WEATHERAPI,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._provider = Provider(provider)
        self._transport = SyncTransport(
            base_url=base_url or self._provider.default_base_url,
            timeout=timeout,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherClient:
        return cls(
            api_key=settings.api_key,
            provider=settings.provider,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self._provider.value!r})"

    @property
    def provider(self) -> Provider:
        return self._provider

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_fetch
    def fetch(self, city: str, units: UnitSystem | str = UnitSystem.METRIC) -> WeatherReading:
        """Get current conditions for ``city``.

        Raises:
            WeatherTransportError: the request never completed.
            WeatherHTTPError: the provider answered with a non-2xx status.
            WeatherDecodeError: the success body did not match the provider schema.
        """
        unit_system = UnitSystem.parse(units)
        params = self._provider.query_params(city, self._api_key, unit_system)
        body = self._transport.get(self._provider.endpoint, params)
        return map_response(self._provider, body, unit_system)


class AsyncWeatherClient:
    """Asynchronous weather client.

    Usage:
        async with AsyncWeatherClient(api_key="...") as client:
            reading = await client.fetch("London")
    """

    def __init__(
        self,
        api_key: str,
        provider: Provider = Provider.WEATHERAPI,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._provider = Provider(provider)
        self._transport = AsyncTransport(
            base_url=base_url or self._provider.default_base_url,
            timeout=timeout,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> AsyncWeatherClient:
        return cls(
            api_key=settings.api_key,
            provider=settings.provider,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self._provider.value!r})"

    @property
    def provider(self) -> Provider:
        return self._provider

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_fetch_async
    async def fetch(
        self, city: str, units: UnitSystem | str = UnitSystem.METRIC
    ) -> WeatherReading:
        """Get current conditions for ``city``; see ``WeatherClient.fetch``."""
        unit_system = UnitSystem.parse(units)
        params = self._provider.query_params(city, self._api_key, unit_system)
        body = await self._transport.get(self._provider.endpoint, params)
        return map_response(self._provider, body, unit_system)
