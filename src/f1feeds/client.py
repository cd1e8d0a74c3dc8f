"""Public client classes for the OpenF1 live timing API."""

from __future__ import annotations

from typing import Any, TypeVar

from f1feeds._base import AsyncBaseClient, BaseClient
from f1feeds._http import OPENF1_BASE_URL
from f1feeds._params import build_query_params
from f1feeds._validation import validate_each, validate_list
from f1feeds.models.driver import Driver
from f1feeds.models.meeting import Meeting
from f1feeds.models.session import Session
from f1feeds.models.session_result import SessionResult

T = TypeVar("T")


class OpenF1Client(BaseClient):
    """Synchronous client for the OpenF1 API.

    Every endpoint takes OpenF1 query filters as keyword arguments, e.g.
    ``sessions(year=2024, session_name="Race")``.

    Usage:
        with OpenF1Client() as f1:
            meetings = f1.meetings(year=2024)
    """

    default_base_url = OPENF1_BASE_URL

    def _list(
        self, endpoint: str, model: type[T], filters: dict[str, Any], lenient: bool = False
    ) -> list[T]:
        validate = validate_each if lenient else validate_list
        return validate(model, self._transport.get(endpoint, build_query_params(**filters)))

    def drivers(self, **filters: Any) -> list[Driver]:
        """Roster of a session, with team colours and headshots."""
        return self._list("/drivers", Driver, filters)

    def meetings(self, **filters: Any) -> list[Meeting]:
        """Grand Prix weekends and test events."""
        return self._list("/meetings", Meeting, filters, lenient=True)

    def sessions(self, **filters: Any) -> list[Session]:
        """Sessions of a season or meeting; malformed entries are dropped."""
        return self._list("/sessions", Session, filters, lenient=True)

    def session_result(self, **filters: Any) -> list[SessionResult]:
        """Final classification of a session."""
        return self._list("/session_result", SessionResult, filters)


class AsyncOpenF1Client(AsyncBaseClient):
    """Asynchronous client for the OpenF1 API.

    Usage:
        async with AsyncOpenF1Client() as f1:
            roster = await f1.drivers(session_key=9161)
    """

    default_base_url = OPENF1_BASE_URL

    async def _list(
        self, endpoint: str, model: type[T], filters: dict[str, Any], lenient: bool = False
    ) -> list[T]:
        data = await self._transport.get(endpoint, build_query_params(**filters))
        validate = validate_each if lenient else validate_list
        return validate(model, data)

    async def drivers(self, **filters: Any) -> list[Driver]:
        """Roster of a session, with team colours and headshots."""
        return await self._list("/drivers", Driver, filters)

    async def meetings(self, **filters: Any) -> list[Meeting]:
        """Grand Prix weekends and test events."""
        return await self._list("/meetings", Meeting, filters, lenient=True)

    async def sessions(self, **filters: Any) -> list[Session]:
        return await self._list("/sessions", Session, filters, lenient=True)

    async def session_result(self, **filters: Any) -> list[SessionResult]:
        """Final classification of a session."""
        return await self._list("/session_result", SessionResult, filters)
