"""Data contracts for the F1 dashboard data layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SessionKind(str, Enum):
    """The seven session slots of a race weekend, in running order."""

    FP1 = "fp1"
    FP2 = "fp2"
    FP3 = "fp3"
    QUALIFYING = "qualifying"
    SPRINT_QUALIFYING = "sprint_qualifying"
    SPRINT = "sprint"
    RACE = "race"

    @property
    def is_practice(self) -> bool:
        return self in PRACTICE_KINDS

    @property
    def is_qualifying_type(self) -> bool:
        return self in (SessionKind.QUALIFYING, SessionKind.SPRINT_QUALIFYING)


SESSION_KINDS: tuple[SessionKind, ...] = tuple(SessionKind)
PRACTICE_KINDS = frozenset({SessionKind.FP1, SessionKind.FP2, SessionKind.FP3})

SYNTHETIC_TAGS: dict[SessionKind, int] = {
    kind: tag for tag, kind in enumerate(SESSION_KINDS, start=1)
}


# ── Session identifiers ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class RealKey:
    """Identifier issued by the live provider; resolvable to results."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Real session keys are non-negative, got {self.value}")

    def as_int(self) -> int:
        return self.value


@dataclass(frozen=True)
class SyntheticKey:
    """Placeholder identifier generated locally; never sent upstream."""

    value: int

    def __post_init__(self) -> None:
        if self.value >= 0:
            raise ValueError(f"Synthetic session keys are negative, got {self.value}")

    @classmethod
    def for_session(cls, year: int, round: int, kind: SessionKind) -> SyntheticKey:
        """Deterministic key, unique per (year, round, kind) for rounds below 100."""
        return cls(-(year * 10000 + round * 100 + SYNTHETIC_TAGS[kind]))

    def as_int(self) -> int:
        return self.value


@dataclass(frozen=True)
class UnknownKey:
    """No identifier is known for the session."""

    def as_int(self) -> None:
        return None


SessionKey = RealKey | SyntheticKey | UnknownKey

UNKNOWN_KEY = UnknownKey()


# ── Schedule ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SessionInfo:
    time: datetime | None = None
    key: SessionKey = UNKNOWN_KEY

    @property
    def is_scheduled(self) -> bool:
        return self.time is not None


EMPTY_SESSION = SessionInfo()


@dataclass(frozen=True)
class NormalizedRace:
    """One Grand Prix weekend, identical in shape whichever provider produced it."""

    id: str
    name: str
    circuit: str
    city: str
    country: str
    round: int
    year: int
    utc_start: datetime | None
    sessions: dict[SessionKind, SessionInfo] = field(default_factory=dict)

    def session(self, kind: SessionKind) -> SessionInfo:
        return self.sessions.get(kind, EMPTY_SESSION)

    @property
    def has_sprint(self) -> bool:
        return self.session(SessionKind.SPRINT).is_scheduled


# ── Results and standings ────────────────────────────────────────────────────


@dataclass(frozen=True)
class SessionResult:
    position: int | None
    driver_number: int | None
    driver_name: str
    driver_acronym: str
    team_name: str
    team_colour: str  # hex without '#'
    time: str
    points: float = 0.0
    headshot_url: str | None = None

    @property
    def is_classified(self) -> bool:
        return self.position is not None


@dataclass(frozen=True)
class DriverStandingRow:
    position: int | None
    driver_id: str
    driver_name: str
    driver_code: str
    team_name: str
    team_colour: str
    points: float
    wins: int
    headshot_url: str | None = None


@dataclass(frozen=True)
class ConstructorStandingRow:
    position: int | None
    constructor_id: str
    name: str
    display_name: str
    team_colour: str
    points: float
    wins: int
