"""Championship standings. Supplementary: every failure degrades to an empty list."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from f1feeds import AsyncJolpicaClient, AsyncOpenF1Client, F1FeedError
from f1feeds.models import ConstructorStanding, DriverStanding

from ..api_logging import get_logger, log_service_call
from ..config import get_settings
from ..constants import DRIVER_TEAM_OVERRIDES
from ..data.types import ConstructorStandingRow, DriverStandingRow
from .common import display_team_name, resolve_driver_image, resolve_team_colour


def build_driver_row(standing: DriverStanding) -> DriverStandingRow:
    driver = standing.driver
    # A driver who changed teams lists the current one last.
    api_team = standing.constructors[-1].name if standing.constructors else ""
    team = DRIVER_TEAM_OVERRIDES.get(driver.driver_id, api_team)
    return DriverStandingRow(
        position=standing.position,
        driver_id=driver.driver_id,
        driver_name=driver.full_name,
        driver_code=driver.code or driver.family_name[:3].upper(),
        team_name=team,
        team_colour=resolve_team_colour(team),
        points=standing.points,
        wins=standing.wins,
        headshot_url=resolve_driver_image(driver.driver_id),
    )


def build_constructor_row(standing: ConstructorStanding) -> ConstructorStandingRow:
    constructor = standing.constructor
    return ConstructorStandingRow(
        position=standing.position,
        constructor_id=constructor.constructor_id,
        name=constructor.name,
        display_name=display_team_name(constructor.name),
        team_colour=resolve_team_colour(constructor.name),
        points=standing.points,
        wins=standing.wins,
    )


def with_headshots(
    rows: list[DriverStandingRow], headshots: dict[str, str],
) -> list[DriverStandingRow]:
    """Prefer live roster headshots (keyed by driver code) over the static table."""
    return [
        replace(row, headshot_url=headshots[row.driver_code]) if row.driver_code in headshots else row
        for row in rows
    ]


@log_service_call
async def fetch_driver_standings(year: int) -> list[DriverStandingRow]:
    settings = get_settings()
    try:
        async with AsyncJolpicaClient(settings.jolpica_base_url, settings.request_timeout) as ergast:
            standings = await ergast.driver_standings(year)
    except F1FeedError as exc:
        get_logger().warning("DEGRADED: driver standings for %s: %s", year, exc)
        return []
    return [build_driver_row(s) for s in standings]


@log_service_call
async def fetch_constructor_standings(year: int) -> list[ConstructorStandingRow]:
    settings = get_settings()
    try:
        async with AsyncJolpicaClient(settings.jolpica_base_url, settings.request_timeout) as ergast:
            standings = await ergast.constructor_standings(year)
    except F1FeedError as exc:
        get_logger().warning("DEGRADED: constructor standings for %s: %s", year, exc)
        return []
    return [build_constructor_row(s) for s in standings]


def _utc_start(moment: datetime | None) -> datetime | None:
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=timezone.utc)


@log_service_call
async def fetch_driver_headshots(year: int, now: datetime | None = None) -> dict[str, str]:
    """Map driver code to headshot URL from the roster of the latest race already run.

    Future races are skipped; their rosters are usually still empty.
    """
    now = now or datetime.now(timezone.utc)
    settings = get_settings()
    try:
        async with AsyncOpenF1Client(settings.openf1_base_url, settings.request_timeout) as f1:
            races = await f1.sessions(year=year, session_name="Race")
            held = [
                (start, s.session_key) for s in races
                if s.session_key is not None
                and (start := _utc_start(s.date_start)) is not None
                and start <= now
            ]
            if not held:
                return {}
            _, latest_key = max(held)
            roster = await f1.drivers(session_key=latest_key)
    except F1FeedError as exc:
        get_logger().warning("DEGRADED: driver headshots for %s: %s", year, exc)
        return {}
    return {
        d.name_acronym: d.headshot_url
        for d in roster
        if d.name_acronym and d.headshot_url
    }
