"""Custom exceptions for the weather client."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather client errors."""


class WeatherTransportError(WeatherError):
    """Raised when a request never completed at the network layer."""


class WeatherConnectionError(WeatherTransportError):
    """Raised when the client cannot connect to the provider."""


class WeatherTimeoutError(WeatherTransportError):
    """Raised when a request to the provider times out."""


class WeatherHTTPError(WeatherError):
    """Raised when the provider answers with a non-success status.

    The body is kept verbatim; providers embed their own error detail there
    (for example "No matching location found.").
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class WeatherDecodeError(WeatherError):
    """Raised when a success response body does not match the provider schema."""
