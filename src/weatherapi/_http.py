"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from weatherapi.exceptions import (
    MalformedResponseError,
    NetworkError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherTimeoutError,
)

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise WeatherAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Response body is not JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    The API key is sent as the ``key`` query parameter on every request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            params={"key": api_key},
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            params={"key": api_key},
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
