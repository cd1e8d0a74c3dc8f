"""Session classification fetchers for the results view."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Any

from f1feeds import AsyncJolpicaClient, AsyncOpenF1Client, F1FeedAPIError, F1FeedError
from f1feeds.models import Driver, QualifyingResult, RaceResult
from f1feeds.models import SessionResult as LiveResult

from ..api_logging import log_service_call
from ..config import get_settings
from ..data.errors import FetchFailure
from ..data.types import RealKey, SessionKey, SessionKind, SessionResult
from ..formatters import format_gap, format_lap_time, format_race_duration
from .common import first_present, resolve_driver_image, resolve_team_colour

# Sort rank for unclassified entries; never exposed as a position.
UNCLASSIFIED_RANK = 999

HISTORICAL_RESULT_KINDS = frozenset(
    {SessionKind.QUALIFYING, SessionKind.SPRINT, SessionKind.RACE},
)


def sort_results(results: list[SessionResult]) -> list[SessionResult]:
    """Order by position with unclassified entries last, keeping upstream order among them."""
    return sorted(
        results,
        key=lambda r: r.position if r.position is not None else UNCLASSIFIED_RANK,
    )


# ── Historical provider ─────────────────────────────────────────────────────


def from_race_result(row: RaceResult) -> SessionResult:
    team = row.constructor.name if row.constructor else ""
    if row.time is not None and row.time.time:
        time = row.time.time
    else:
        time = row.status or ""
    return SessionResult(
        position=row.position if row.is_classified else None,
        driver_number=row.number if row.number is not None else row.driver.permanent_number,
        driver_name=row.driver.full_name,
        driver_acronym=row.driver.code or row.driver.family_name[:3].upper(),
        team_name=team,
        team_colour=resolve_team_colour(team),
        time=time,
        points=max(row.points, 0.0),
        headshot_url=resolve_driver_image(row.driver.driver_id),
    )


def from_qualifying_result(row: QualifyingResult) -> SessionResult:
    team = row.constructor.name if row.constructor else ""
    return SessionResult(
        position=row.position,
        driver_number=row.number if row.number is not None else row.driver.permanent_number,
        driver_name=row.driver.full_name,
        driver_acronym=row.driver.code or row.driver.family_name[:3].upper(),
        team_name=team,
        team_colour=resolve_team_colour(team),
        time=row.q3 or row.q2 or row.q1 or "",
        points=0.0,
        headshot_url=resolve_driver_image(row.driver.driver_id),
    )


@log_service_call
async def fetch_session_results(year: int, round: int, kind: SessionKind) -> list[SessionResult]:
    """Classification of one session from the historical provider.

    Practice and sprint qualifying are not published there, so those return
    an empty list without touching the network. Unpublished results (404)
    are also an empty list.
    """
    if kind not in HISTORICAL_RESULT_KINDS:
        return []

    settings = get_settings()
    try:
        async with AsyncJolpicaClient(settings.jolpica_base_url, settings.request_timeout) as ergast:
            if kind is SessionKind.QUALIFYING:
                rows = [from_qualifying_result(r) for r in await ergast.qualifying_results(year, round)]
            elif kind is SessionKind.SPRINT:
                rows = [from_race_result(r) for r in await ergast.sprint_results(year, round)]
            else:
                rows = [from_race_result(r) for r in await ergast.race_results(year, round)]
    except F1FeedAPIError as exc:
        if exc.is_not_found:
            return []
        raise FetchFailure(
            f"Failed to fetch {kind.value} results for {year} round {round}: {exc}",
            status_code=exc.status_code,
        ) from exc
    except F1FeedError as exc:
        raise FetchFailure(
            f"Failed to fetch {kind.value} results for {year} round {round}: {exc}",
        ) from exc
    return sort_results(rows)


# ── Live provider ────────────────────────────────────────────────────────────


def live_time_text(row: LiveResult, kind: SessionKind) -> str:
    """Lap time for timed sessions, total time or gap for races, else a status token."""
    if row.dsq:
        return "DSQ"
    if row.dns:
        return "DNS"
    if row.dnf:
        return "DNF"

    if kind.is_qualifying_type or kind.is_practice or isinstance(row.duration, list):
        durations = row.duration if isinstance(row.duration, list) else [row.duration]
        for value in reversed(durations):
            if value is not None:
                return format_lap_time(value)
        return ""

    gap = row.gap_to_leader
    if isinstance(gap, str) and gap:
        return gap
    if isinstance(gap, (int, float)) and gap > 0:
        return format_gap(gap)
    if isinstance(row.duration, (int, float)):
        return format_race_duration(row.duration)
    return ""


def merge_live_result(row: LiveResult, driver: Driver | None, kind: SessionKind) -> SessionResult:
    """Build one result row, preferring the session roster over the result's own driver fields."""
    roster = driver if driver is not None else Driver()
    team = first_present(roster.team_name, row.team_name) or ""
    unclassified = row.dnf or row.dns or row.dsq
    return SessionResult(
        position=None if unclassified else row.position,
        driver_number=row.driver_number,
        driver_name=first_present(roster.full_name, row.full_name, row.broadcast_name)
        or f"#{row.driver_number}",
        driver_acronym=first_present(roster.name_acronym, row.name_acronym) or "",
        team_name=team,
        team_colour=first_present(roster.team_colour) or resolve_team_colour(team),
        time=live_time_text(row, kind),
        points=max(row.points or 0.0, 0.0),
        headshot_url=roster.headshot_url,
    )


async def _empty_if_not_found(request: Awaitable[list[Any]]) -> list[Any]:
    try:
        return await request
    except F1FeedAPIError as exc:
        if exc.is_not_found:
            return []
        raise


@log_service_call
async def fetch_live_session_results(
    session_key: SessionKey, kind: SessionKind,
) -> list[SessionResult]:
    """Classification of one session from the live provider, joined with its roster.

    Only real keys are sent upstream; synthetic and unknown keys yield [].
    """
    if not isinstance(session_key, RealKey):
        return []

    settings = get_settings()
    try:
        async with AsyncOpenF1Client(settings.openf1_base_url, settings.request_timeout) as f1:
            rows, roster = await asyncio.gather(
                _empty_if_not_found(f1.session_result(session_key=session_key.value)),
                _empty_if_not_found(f1.drivers(session_key=session_key.value)),
            )
    except F1FeedError as exc:
        raise FetchFailure(
            f"Failed to fetch results for session {session_key.value}: {exc}",
            status_code=getattr(exc, "status_code", None),
        ) from exc

    by_number = {d.driver_number: d for d in roster if d.driver_number is not None}
    return sort_results(
        [merge_live_result(row, by_number.get(row.driver_number), kind) for row in rows],
    )
