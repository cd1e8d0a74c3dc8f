"""Jolpica (Ergast) schedule adapter."""

from __future__ import annotations

import datetime
from datetime import timezone

from f1feeds import AsyncJolpicaClient, F1FeedError
from f1feeds.models import Race, SessionSlot

from ..api_logging import get_logger, log_api_call
from ..config import get_settings
from .base import ScheduleSource
from .errors import FetchFailure, MalformedRecord
from .types import EMPTY_SESSION, NormalizedRace, SessionInfo, SessionKind, SyntheticKey


def compose_utc(day: datetime.date | None, time_of_day: str | None) -> datetime.datetime | None:
    """Combine an Ergast date and optional ``HH:MM:SSZ`` time into an aware UTC datetime.

    A missing time-of-day means midnight UTC. Unparseable input yields None.
    """
    if day is None:
        return None
    clock = (time_of_day or "00:00:00Z").replace(" ", "")
    if not clock.endswith("Z") and "+" not in clock and "-" not in clock:
        clock += "Z"
    try:
        parsed = datetime.datetime.fromisoformat(f"{day.isoformat()}T{clock}")
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _session(race: Race, kind: SessionKind, slot: SessionSlot | None) -> SessionInfo:
    if slot is None:
        return EMPTY_SESSION
    return SessionInfo(
        time=compose_utc(slot.date, slot.time),
        key=SyntheticKey.for_session(race.season, race.round, kind),
    )


def build_race(race: Race) -> NormalizedRace:
    """Normalize one Ergast calendar entry."""
    if race.round < 1:
        raise MalformedRecord(f"{race.race_name!r} has non-positive round {race.round}")
    if race.round >= 100:
        raise MalformedRecord(f"{race.race_name!r} has out-of-range round {race.round}")

    slots: dict[SessionKind, SessionSlot | None] = {
        SessionKind.FP1: race.first_practice,
        SessionKind.FP2: race.second_practice,
        SessionKind.FP3: race.third_practice,
        SessionKind.QUALIFYING: race.qualifying,
        # 2023 called it the sprint shootout
        SessionKind.SPRINT_QUALIFYING: race.sprint_qualifying or race.sprint_shootout,
        SessionKind.SPRINT: race.sprint,
        SessionKind.RACE: SessionSlot(date=race.date, time=race.time),
    }
    sessions = {kind: _session(race, kind, slot) for kind, slot in slots.items()}

    circuit = race.circuit
    name = race.race_name.strip() or circuit.circuit_name or f"Round {race.round}"
    circuit_name = circuit.circuit_name or circuit.circuit_id or name
    city = circuit.location.locality or circuit_name
    country = circuit.location.country or city

    return NormalizedRace(
        id=f"{race.season}-{race.round}",
        name=name,
        circuit=circuit_name,
        city=city,
        country=country,
        round=race.round,
        year=race.season,
        utc_start=sessions[SessionKind.RACE].time,
        sessions=sessions,
    )


class JolpicaScheduleSource(ScheduleSource):
    """Historical calendar: explicit rounds, dates only, no session identifiers."""

    name = "Jolpica"

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        settings = get_settings()
        self._base_url = base_url or settings.jolpica_base_url
        self._timeout = timeout or settings.request_timeout

    @log_api_call
    async def get_season(self, year: int) -> list[NormalizedRace]:
        try:
            async with AsyncJolpicaClient(self._base_url, self._timeout) as ergast:
                races = await ergast.races(year)
        except F1FeedError as exc:
            raise FetchFailure(
                f"Failed to fetch schedule for {year}: {exc}",
                status_code=getattr(exc, "status_code", None),
            ) from exc

        normalized: list[NormalizedRace] = []
        for race in races:
            try:
                normalized.append(build_race(race))
            except MalformedRecord as exc:
                get_logger().warning("SKIP: Jolpica race in %s: %s", year, exc)
        return normalized
