"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import httpx

from weatherdash.exceptions import (
    WeatherConnectionError,
    WeatherHTTPError,
    WeatherTimeoutError,
    WeatherTransportError,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> bytes:
    """Validate response status and return the raw body."""
    if not response.is_success:
        raise WeatherHTTPError(
            status_code=response.status_code,
            body=response.text,
        )
    return response.content


def _transport_error(exc: httpx.TransportError) -> WeatherTransportError:
    if isinstance(exc, httpx.TimeoutException):
        return WeatherTimeoutError(str(exc))
    if isinstance(exc, httpx.ConnectError):
        return WeatherConnectionError(str(exc))
    return WeatherTransportError(str(exc))


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> bytes:
        """Perform a GET request and return the success body."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.TransportError as exc:
            raise _transport_error(exc) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> bytes:
        """Perform an async GET request and return the success body."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TransportError as exc:
            raise _transport_error(exc) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
