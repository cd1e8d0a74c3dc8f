"""Connection lifecycle shared by the provider clients."""

from __future__ import annotations

from typing import Self

from f1feeds._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport


class BaseClient:
    """Owns a SyncTransport bound to ``default_base_url`` unless overridden."""

    default_base_url: str = ""

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = SyncTransport(base_url=base_url or self.default_base_url, timeout=timeout)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()


class AsyncBaseClient:
    """Owns an AsyncTransport bound to ``default_base_url`` unless overridden."""

    default_base_url: str = ""

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = AsyncTransport(base_url=base_url or self.default_base_url, timeout=timeout)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()
