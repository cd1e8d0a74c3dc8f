"""Next-session and latest-finished-session resolution over a normalized season."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ..data.types import SESSION_KINDS, NormalizedRace, SessionKey, SessionKind

# Session length plus buffer; a session counts as finished this long after its start.
SESSION_WINDOW = timedelta(hours=2)


@dataclass(frozen=True)
class ResolvedSession:
    kind: SessionKind
    time: datetime
    race: NormalizedRace
    key: SessionKey


@dataclass(frozen=True)
class WeekendSession:
    kind: SessionKind
    time: datetime
    key: SessionKey
    upcoming: bool


def _aware(now: datetime) -> datetime:
    return now if now.tzinfo is not None else now.replace(tzinfo=timezone.utc)


def iter_session_slots(races: Iterable[NormalizedRace]) -> Iterator[ResolvedSession]:
    """Yield every timed slot, kinds in weekend order outermost, races in list order within.

    A race without a timed race session still contributes its ``utc_start``.
    """
    races = list(races)
    for kind in SESSION_KINDS:
        for race in races:
            info = race.session(kind)
            moment = info.time
            if kind is SessionKind.RACE and moment is None:
                moment = race.utc_start
            if moment is not None:
                yield ResolvedSession(kind=kind, time=moment, race=race, key=info.key)


def next_session(races: Iterable[NormalizedRace], now: datetime) -> ResolvedSession | None:
    """Return the soonest slot strictly after ``now``; ties keep the first enumerated."""
    now = _aware(now)
    best: ResolvedSession | None = None
    for slot in iter_session_slots(races):
        if slot.time > now and (best is None or slot.time < best.time):
            best = slot
    return best


def latest_finished_session(
    races: Iterable[NormalizedRace], now: datetime,
) -> ResolvedSession | None:
    """Return the most recent slot whose window closed strictly before ``now``."""
    now = _aware(now)
    best: ResolvedSession | None = None
    for slot in iter_session_slots(races):
        if slot.time + SESSION_WINDOW < now and (best is None or slot.time > best.time):
            best = slot
    return best


def next_race(races: Iterable[NormalizedRace], now: datetime) -> NormalizedRace | None:
    """Return the race with the soonest future start."""
    now = _aware(now)
    upcoming = [race for race in races if race.utc_start is not None and race.utc_start > now]
    return min(upcoming, key=lambda race: race.utc_start, default=None)  # type: ignore[arg-type, return-value]


def weekend_sessions(race: NormalizedRace, now: datetime) -> list[WeekendSession]:
    """Timed sessions of one weekend, in chronological order."""
    now = _aware(now)
    rows = [
        WeekendSession(kind=kind, time=info.time, key=info.key, upcoming=info.time > now)
        for kind in SESSION_KINDS
        if (info := race.session(kind)).time is not None
    ]
    return sorted(rows, key=lambda row: row.time)


def has_started(race: NormalizedRace, now: datetime) -> bool:
    """True once any session of the weekend has begun, not only the race."""
    now = _aware(now)
    return any(slot.time <= now for slot in iter_session_slots([race]))
