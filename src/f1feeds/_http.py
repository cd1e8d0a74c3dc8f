"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from f1feeds.exceptions import (
    F1FeedAPIError,
    F1FeedConnectionError,
    F1FeedTimeoutError,
    F1FeedValidationError,
)

OPENF1_BASE_URL = "https://api.openf1.org/v1"
JOLPICA_BASE_URL = "https://api.jolpi.ca/ergast/f1"
DEFAULT_TIMEOUT = 30.0

Params = list[tuple[str, str]]

_HEADERS = {"Accept": "application/json"}


@contextmanager
def _translated_errors() -> Iterator[None]:
    """Re-raise httpx transport failures as f1feeds exceptions."""
    try:
        yield
    except httpx.ConnectError as exc:
        raise F1FeedConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise F1FeedTimeoutError(str(exc)) from exc
    except httpx.TransportError as exc:
        raise F1FeedConnectionError(str(exc)) from exc


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise F1FeedAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise F1FeedValidationError(f"Response is not JSON: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = OPENF1_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str, params: Params | None = None) -> Any:
        """Perform a GET request and return parsed JSON."""
        with _translated_errors():
            response = self._client.get(endpoint, params=params or [])
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = OPENF1_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def get(self, endpoint: str, params: Params | None = None) -> Any:
        """Perform an async GET request and return parsed JSON."""
        with _translated_errors():
            response = await self._client.get(endpoint, params=params or [])
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
