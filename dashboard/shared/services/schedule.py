"""Season schedule assembly and the home page loader."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ..api_logging import get_logger, log_service_call
from ..data import get_schedule_source
from ..data.base import ScheduleSource
from ..data.patches import apply_known_gaps
from ..data.types import ConstructorStandingRow, DriverStandingRow, NormalizedRace
from .standings import (
    fetch_constructor_standings,
    fetch_driver_headshots,
    fetch_driver_standings,
    with_headshots,
)


def order_by_round(races: list[NormalizedRace]) -> list[NormalizedRace]:
    """Sort by round, dropping any later entry that repeats a round already seen."""
    ordered: list[NormalizedRace] = []
    seen: set[int] = set()
    for race in sorted(races, key=lambda r: r.round):
        if race.round in seen:
            get_logger().warning("SKIP: duplicate round %d (%s)", race.round, race.name)
            continue
        seen.add(race.round)
        ordered.append(race)
    return ordered


@log_service_call
async def normalize_season_schedule(
    year: int, source: ScheduleSource | None = None,
) -> list[NormalizedRace]:
    """Fetch, patch and order one season's races.

    Raises FetchFailure when the provider cannot be read.
    """
    source = source or get_schedule_source()
    races = await source.get_season(year)
    return order_by_round(apply_known_gaps(races, year))


@dataclass(frozen=True)
class HomeData:
    races: list[NormalizedRace]
    driver_standings: list[DriverStandingRow]
    constructor_standings: list[ConstructorStandingRow]


@log_service_call
async def load_home_data(year: int, source: ScheduleSource | None = None) -> HomeData:
    """Load everything the home page shows in one concurrent round trip.

    Only the schedule is required; the standings fetchers degrade on their own.
    """
    races, drivers, constructors, headshots = await asyncio.gather(
        normalize_season_schedule(year, source),
        fetch_driver_standings(year),
        fetch_constructor_standings(year),
        fetch_driver_headshots(year),
    )
    return HomeData(
        races=races,
        driver_standings=with_headshots(drivers, headshots),
        constructor_standings=constructors,
    )
