"""Public client classes for the Jolpica mirror of the Ergast API.

Every Ergast document is wrapped in an ``MRData`` envelope. The helpers below
unwrap it and validate the interesting list. Season calendars are validated
record by record so a single bad round does not hide the rest of the season.
"""

from __future__ import annotations

from typing import Any

from f1feeds._base import AsyncBaseClient, BaseClient
from f1feeds._http import JOLPICA_BASE_URL
from f1feeds._params import build_query_params
from f1feeds._validation import unwrap, validate_each, validate_list
from f1feeds.models.results import QualifyingResult, RaceResult
from f1feeds.models.schedule import Race
from f1feeds.models.standings import ConstructorStanding, DriverStanding

# Ergast pages at 30 rows by default; a season never exceeds this.
PAGE_LIMIT = 100

_RESULT_LISTS = {
    "results": ("Results", RaceResult),
    "sprint": ("SprintResults", RaceResult),
    "qualifying": ("QualifyingResults", QualifyingResult),
}

_STANDING_LISTS = {
    "driverStandings": ("DriverStandings", DriverStanding),
    "constructorStandings": ("ConstructorStandings", ConstructorStanding),
}


def _parse_races(data: Any) -> list[Race]:
    return validate_each(Race, unwrap(data, "MRData", "RaceTable", "Races"))


def _parse_round_results(data: Any, resource: str) -> list[Any]:
    list_key, model = _RESULT_LISTS[resource]
    races = unwrap(data, "MRData", "RaceTable", "Races")
    if not races:
        return []
    return validate_list(model, unwrap(races[0], list_key))


def _parse_standings(data: Any, resource: str) -> list[Any]:
    list_key, model = _STANDING_LISTS[resource]
    lists = unwrap(data, "MRData", "StandingsTable", "StandingsLists")
    if not lists:
        return []
    return validate_list(model, unwrap(lists[0], list_key))


def _paged() -> list[tuple[str, str]]:
    return build_query_params(limit=PAGE_LIMIT)


class JolpicaClient(BaseClient):
    """Synchronous client for the Jolpica (Ergast) API.

    Usage:
        with JolpicaClient() as ergast:
            races = ergast.races(2024)
            podium = ergast.race_results(2024, 1)[:3]
    """

    default_base_url = JOLPICA_BASE_URL

    def races(self, season: int | str) -> list[Race]:
        """Season calendar with per-session dates."""
        return _parse_races(self._transport.get(f"/{season}.json", _paged()))

    def _round(self, season: int, round: int, resource: str) -> list[Any]:
        data = self._transport.get(f"/{season}/{round}/{resource}.json", _paged())
        return _parse_round_results(data, resource)

    def race_results(self, season: int, round: int) -> list[RaceResult]:
        return self._round(season, round, "results")

    def sprint_results(self, season: int, round: int) -> list[RaceResult]:
        return self._round(season, round, "sprint")

    def qualifying_results(self, season: int, round: int) -> list[QualifyingResult]:
        return self._round(season, round, "qualifying")

    def _standings(self, season: int | str, resource: str) -> list[Any]:
        return _parse_standings(self._transport.get(f"/{season}/{resource}.json", _paged()), resource)

    def driver_standings(self, season: int | str) -> list[DriverStanding]:
        """Latest driver championship table of a season."""
        return self._standings(season, "driverStandings")

    def constructor_standings(self, season: int | str) -> list[ConstructorStanding]:
        """Latest constructor championship table of a season."""
        return self._standings(season, "constructorStandings")


class AsyncJolpicaClient(AsyncBaseClient):
    """Asynchronous client for the Jolpica (Ergast) API.

    Usage:
        async with AsyncJolpicaClient() as ergast:
            races = await ergast.races(2024)
    """

    default_base_url = JOLPICA_BASE_URL

    async def races(self, season: int | str) -> list[Race]:
        """Season calendar with per-session dates."""
        return _parse_races(await self._transport.get(f"/{season}.json", _paged()))

    async def _round(self, season: int, round: int, resource: str) -> list[Any]:
        data = await self._transport.get(f"/{season}/{round}/{resource}.json", _paged())
        return _parse_round_results(data, resource)

    async def race_results(self, season: int, round: int) -> list[RaceResult]:
        return await self._round(season, round, "results")

    async def sprint_results(self, season: int, round: int) -> list[RaceResult]:
        return await self._round(season, round, "sprint")

    async def qualifying_results(self, season: int, round: int) -> list[QualifyingResult]:
        return await self._round(season, round, "qualifying")

    async def _standings(self, season: int | str, resource: str) -> list[Any]:
        data = await self._transport.get(f"/{season}/{resource}.json", _paged())
        return _parse_standings(data, resource)

    async def driver_standings(self, season: int | str) -> list[DriverStanding]:
        """Latest driver championship table of a season."""
        return await self._standings(season, "driverStandings")

    async def constructor_standings(self, season: int | str) -> list[ConstructorStanding]:
        """Latest constructor championship table of a season."""
        return await self._standings(season, "constructorStandings")
