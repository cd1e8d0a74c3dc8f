"""Hand-entered estimates for weekends the providers had not published yet.

Only the events listed here are patched. Slots the provider already fills
are never overwritten.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from ..api_logging import get_logger
from .types import SESSION_KINDS, NormalizedRace, SessionInfo, SessionKind, SyntheticKey


def _utc(text: str) -> datetime:
    return datetime.fromisoformat(text).replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class KnownGap:
    year: int
    round: int
    match: str
    name: str
    circuit: str
    city: str
    country: str
    times: dict[SessionKind, datetime]


KNOWN_GAPS: tuple[KnownGap, ...] = (
    KnownGap(
        year=2025,
        round=22,
        match="las vegas",
        name="Las Vegas Grand Prix",
        circuit="Las Vegas Strip Street Circuit",
        city="Las Vegas",
        country="USA",
        times={
            SessionKind.FP1: _utc("2025-11-21T00:30:00"),
            SessionKind.FP2: _utc("2025-11-21T04:00:00"),
            SessionKind.FP3: _utc("2025-11-22T00:30:00"),
            SessionKind.QUALIFYING: _utc("2025-11-22T04:00:00"),
            SessionKind.RACE: _utc("2025-11-23T04:00:00"),
        },
    ),
    KnownGap(
        year=2025,
        round=23,
        match="qatar",
        name="Qatar Grand Prix",
        circuit="Losail International Circuit",
        city="Lusail",
        country="Qatar",
        times={
            SessionKind.FP1: _utc("2025-11-28T13:30:00"),
            SessionKind.SPRINT_QUALIFYING: _utc("2025-11-28T17:30:00"),
            SessionKind.SPRINT: _utc("2025-11-29T14:00:00"),
            SessionKind.QUALIFYING: _utc("2025-11-29T18:00:00"),
            SessionKind.RACE: _utc("2025-11-30T16:00:00"),
        },
    ),
    KnownGap(
        year=2025,
        round=24,
        match="abu dhabi",
        name="Abu Dhabi Grand Prix",
        circuit="Yas Marina Circuit",
        city="Yas Island",
        country="UAE",
        times={
            SessionKind.FP1: _utc("2025-12-05T09:30:00"),
            SessionKind.FP2: _utc("2025-12-05T13:00:00"),
            SessionKind.FP3: _utc("2025-12-06T10:30:00"),
            SessionKind.QUALIFYING: _utc("2025-12-06T14:00:00"),
            SessionKind.RACE: _utc("2025-12-07T13:00:00"),
        },
    ),
)


def _matches(race: NormalizedRace, gap: KnownGap) -> bool:
    haystack = f"{race.name} {race.city} {race.country}".lower()
    return gap.match in haystack


def _fill(race: NormalizedRace, gap: KnownGap) -> NormalizedRace:
    sessions = dict(race.sessions)
    patched: list[str] = []
    for kind, moment in gap.times.items():
        if race.session(kind).time is not None:
            continue
        sessions[kind] = SessionInfo(
            time=moment,
            key=SyntheticKey.for_session(race.year, race.round, kind),
        )
        patched.append(kind.value)
    if not patched:
        return race
    get_logger().warning(
        "PATCH: %s %s estimated %s", race.year, race.name, ", ".join(patched),
    )
    return replace(
        race,
        sessions=sessions,
        utc_start=sessions[SessionKind.RACE].time if SessionKind.RACE in sessions else race.utc_start,
    )


def _synthesize(gap: KnownGap, round: int) -> NormalizedRace:
    sessions = {
        kind: SessionInfo(
            time=gap.times[kind],
            key=SyntheticKey.for_session(gap.year, round, kind),
        )
        if kind in gap.times
        else SessionInfo()
        for kind in SESSION_KINDS
    }
    get_logger().warning("PATCH: %s %s appended as round %d", gap.year, gap.name, round)
    return NormalizedRace(
        id=f"{gap.year}-{round}",
        name=gap.name,
        circuit=gap.circuit,
        city=gap.city,
        country=gap.country,
        round=round,
        year=gap.year,
        utc_start=sessions[SessionKind.RACE].time,
        sessions=sessions,
    )


def apply_known_gaps(races: list[NormalizedRace], year: int) -> list[NormalizedRace]:
    """Fill or append the enumerated events for ``year``; other races pass through."""
    gaps = [gap for gap in KNOWN_GAPS if gap.year == year]
    if not gaps:
        return list(races)

    patched = list(races)
    for gap in gaps:
        index = next((i for i, race in enumerate(patched) if _matches(race, gap)), None)
        if index is not None:
            patched[index] = _fill(patched[index], gap)
            continue
        taken = {race.round for race in patched}
        round = gap.round if gap.round not in taken else max(taken) + 1
        patched.append(_synthesize(gap, round))
    return patched
