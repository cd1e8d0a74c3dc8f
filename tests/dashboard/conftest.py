"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.fragment = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {"data_source": "Jolpica"}
_mock_st.query_params = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from shared.data.types import (  # noqa: E402
    SESSION_KINDS,
    NormalizedRace,
    SessionInfo,
    SessionKind,
    SyntheticKey,
)


# ── Sample data fixtures ─────────────────────────────────────────────────────


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def _make_race(
    round: int,
    name: str = "Test Grand Prix",
    year: int = 2024,
    times: dict[SessionKind, datetime] | None = None,
    utc_start: datetime | None = None,
) -> NormalizedRace:
    """Build a normalized race; slots missing from ``times`` are TBD."""
    times = times or {}
    sessions = {
        kind: SessionInfo(
            time=times[kind],
            key=SyntheticKey.for_session(year, round, kind),
        )
        if kind in times
        else SessionInfo()
        for kind in SESSION_KINDS
    }
    start = utc_start if utc_start is not None else times.get(SessionKind.RACE)
    return NormalizedRace(
        id=f"{year}-{round}",
        name=name,
        circuit=f"{name} Circuit",
        city=f"{name} City",
        country="Nowhere",
        round=round,
        year=year,
        utc_start=start,
        sessions=sessions,
    )


def _weekend(race_day: datetime, sprint: bool = False) -> dict[SessionKind, datetime]:
    """Standard weekend timings relative to the race start."""
    day = timedelta(days=1)
    if sprint:
        return {
            SessionKind.FP1: race_day - 2 * day - timedelta(hours=3),
            SessionKind.SPRINT_QUALIFYING: race_day - 2 * day + timedelta(hours=1),
            SessionKind.SPRINT: race_day - day - timedelta(hours=3),
            SessionKind.QUALIFYING: race_day - day + timedelta(hours=1),
            SessionKind.RACE: race_day,
        }
    return {
        SessionKind.FP1: race_day - 2 * day - timedelta(hours=3),
        SessionKind.FP2: race_day - 2 * day + timedelta(hours=1),
        SessionKind.FP3: race_day - day - timedelta(hours=3),
        SessionKind.QUALIFYING: race_day - day + timedelta(hours=1),
        SessionKind.RACE: race_day,
    }


@pytest.fixture
def make_race():
    """Factory fixture for creating normalized races."""
    return _make_race


@pytest.fixture
def sample_season() -> list[NormalizedRace]:
    """Three rounds: a standard weekend, a sprint weekend, and a TBD race."""
    return [
        _make_race(1, "Bahrain Grand Prix", times=_weekend(utc(2024, 3, 2, 15))),
        _make_race(2, "Chinese Grand Prix", times=_weekend(utc(2024, 4, 21, 7), sprint=True)),
        _make_race(3, "Mystery Grand Prix"),
    ]


@pytest.fixture
def jolpica_race() -> dict:
    """Ergast calendar entry for a standard weekend."""
    return {
        "season": "2024",
        "round": "1",
        "raceName": "Bahrain Grand Prix",
        "Circuit": {
            "circuitId": "bahrain",
            "circuitName": "Bahrain International Circuit",
            "Location": {"locality": "Sakhir", "country": "Bahrain"},
        },
        "date": "2024-03-02",
        "time": "15:00:00Z",
        "FirstPractice": {"date": "2024-02-29", "time": "11:30:00Z"},
        "SecondPractice": {"date": "2024-02-29", "time": "15:00:00Z"},
        "ThirdPractice": {"date": "2024-03-01", "time": "12:30:00Z"},
        "Qualifying": {"date": "2024-03-01", "time": "16:00:00Z"},
    }


@pytest.fixture
def openf1_sessions() -> list[dict]:
    """OpenF1 sessions for a sprint weekend (meeting 1233)."""
    base = {"meeting_key": 1233, "year": 2024, "location": "Shanghai", "country_name": "China"}
    return [
        {**base, "session_key": 9665, "session_name": "Practice 1", "date_start": "2024-04-19T03:30:00+00:00"},
        {**base, "session_key": 9666, "session_name": "Sprint Qualifying", "date_start": "2024-04-19T07:30:00+00:00"},
        {**base, "session_key": 9672, "session_name": "Sprint", "date_start": "2024-04-20T03:00:00+00:00"},
        {**base, "session_key": 9668, "session_name": "Qualifying", "date_start": "2024-04-20T07:00:00+00:00"},
        {**base, "session_key": 9673, "session_name": "Race", "date_start": "2024-04-21T07:00:00+00:00"},
    ]


@pytest.fixture
def openf1_meetings() -> list[dict]:
    return [
        {
            "meeting_key": 1229,
            "meeting_name": "Pre-Season Testing",
            "location": "Sakhir",
            "country_name": "Bahrain",
            "date_start": "2024-02-21T07:00:00+00:00",
            "year": 2024,
        },
        {
            "meeting_key": 1232,
            "meeting_name": "Japanese Grand Prix",
            "circuit_short_name": "Suzuka",
            "location": "Suzuka",
            "country_name": "Japan",
            "date_start": "2024-04-05T02:30:00+00:00",
            "year": 2024,
        },
        {
            "meeting_key": 1233,
            "meeting_name": "Chinese Grand Prix",
            "circuit_short_name": "Shanghai",
            "location": "Shanghai",
            "country_name": "China",
            "date_start": "2024-04-19T03:30:00+00:00",
            "year": 2024,
        },
    ]


@pytest.fixture
def sample_roster() -> list[dict]:
    return [
        {
            "driver_number": 1,
            "name_acronym": "VER",
            "full_name": "Max VERSTAPPEN",
            "team_name": "Red Bull Racing",
            "team_colour": "3671C6",
            "headshot_url": "https://example.com/ver.png",
        },
        {
            "driver_number": 4,
            "name_acronym": "NOR",
            "full_name": "Lando NORRIS",
            "team_name": "McLaren",
            "team_colour": "FF8000",
            "headshot_url": "https://example.com/nor.png",
        },
        {
            "driver_number": 11,
            "name_acronym": "PER",
            "full_name": "Sergio PEREZ",
            "team_name": "Red Bull Racing",
            "team_colour": "3671C6",
            "headshot_url": None,
        },
    ]
