"""Shared test fixtures and sample API responses."""

from __future__ import annotations

from typing import Any

import pytest

OPENF1_URL = "https://api.openf1.org/v1"
JOLPICA_URL = "https://api.jolpi.ca/ergast/f1"


# ── OpenF1 ───────────────────────────────────────────────────────────────────

SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1219,
    "name_acronym": "VER",
    "session_key": 9161,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_MEETING = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_start": "2023-03-03T11:30:00+00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1141,
    "meeting_name": "Bahrain Grand Prix",
    "meeting_official_name": "FORMULA 1 GULF AIR BAHRAIN GRAND PRIX 2023",
    "year": 2023,
}

SAMPLE_SESSION = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_end": "2023-03-05T17:00:00+00:00",
    "date_start": "2023-03-05T15:00:00+00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1141,
    "session_key": 7953,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2023,
}

SAMPLE_SESSION_RESULT = {
    "dnf": False,
    "dns": False,
    "dsq": False,
    "driver_number": 1,
    "duration": 5636.736,
    "gap_to_leader": 0,
    "meeting_key": 1141,
    "number_of_laps": 57,
    "points": 25.0,
    "position": 1,
    "session_key": 7953,
}

SAMPLE_QUALIFYING_RESULT = {
    "dnf": False,
    "dns": False,
    "dsq": False,
    "driver_number": 1,
    "duration": [91.295, 90.503, 89.708],
    "gap_to_leader": [0, 0, 0],
    "meeting_key": 1141,
    "number_of_laps": 18,
    "position": 1,
    "session_key": 7952,
}


# ── Jolpica (Ergast) ─────────────────────────────────────────────────────────

SAMPLE_ERGAST_DRIVER = {
    "driverId": "max_verstappen",
    "permanentNumber": "33",
    "code": "VER",
    "givenName": "Max",
    "familyName": "Verstappen",
    "nationality": "Dutch",
}

SAMPLE_ERGAST_CONSTRUCTOR = {
    "constructorId": "red_bull",
    "name": "Red Bull",
    "nationality": "Austrian",
}

SAMPLE_RACE = {
    "season": "2024",
    "round": "6",
    "raceName": "Miami Grand Prix",
    "Circuit": {
        "circuitId": "miami",
        "circuitName": "Miami International Autodrome",
        "Location": {"lat": "25.9581", "long": "-80.2389", "locality": "Miami", "country": "USA"},
    },
    "date": "2024-05-05",
    "time": "20:00:00Z",
    "FirstPractice": {"date": "2024-05-03", "time": "16:30:00Z"},
    "SprintQualifying": {"date": "2024-05-03", "time": "20:30:00Z"},
    "Sprint": {"date": "2024-05-04", "time": "16:00:00Z"},
    "Qualifying": {"date": "2024-05-04", "time": "20:00:00Z"},
}

SAMPLE_RACE_RESULT = {
    "number": "1",
    "position": "1",
    "positionText": "1",
    "points": "25",
    "Driver": SAMPLE_ERGAST_DRIVER,
    "Constructor": SAMPLE_ERGAST_CONSTRUCTOR,
    "grid": "1",
    "laps": "57",
    "status": "Finished",
    "Time": {"millis": "5504742", "time": "1:31:44.742"},
}

SAMPLE_QUALIFYING_ROW = {
    "number": "1",
    "position": "1",
    "Driver": SAMPLE_ERGAST_DRIVER,
    "Constructor": SAMPLE_ERGAST_CONSTRUCTOR,
    "Q1": "1:30.031",
    "Q2": "1:29.374",
    "Q3": "1:29.179",
}

SAMPLE_DRIVER_STANDING = {
    "position": "1",
    "positionText": "1",
    "points": "575",
    "wins": "19",
    "Driver": SAMPLE_ERGAST_DRIVER,
    "Constructors": [SAMPLE_ERGAST_CONSTRUCTOR],
}

SAMPLE_CONSTRUCTOR_STANDING = {
    "position": "1",
    "positionText": "1",
    "points": "860",
    "wins": "21",
    "Constructor": SAMPLE_ERGAST_CONSTRUCTOR,
}


def mrdata_races(races: list[dict[str, Any]], season: str = "2024") -> dict[str, Any]:
    """Wrap race entries in the Ergast ``MRData.RaceTable`` envelope."""
    return {
        "MRData": {
            "limit": "100",
            "offset": "0",
            "total": str(len(races)),
            "RaceTable": {"season": season, "Races": races},
        }
    }


def mrdata_round(list_key: str, rows: list[dict[str, Any]], round: str = "1") -> dict[str, Any]:
    """Wrap one round's classification under ``Races[0][list_key]``."""
    race = {**SAMPLE_RACE, "round": round, list_key: rows}
    return mrdata_races([race])


def mrdata_standings(list_key: str, rows: list[dict[str, Any]], season: str = "2024") -> dict[str, Any]:
    """Wrap standings rows in the ``MRData.StandingsTable`` envelope."""
    return {
        "MRData": {
            "StandingsTable": {
                "season": season,
                "StandingsLists": [{"season": season, "round": "24", list_key: rows}],
            }
        }
    }


@pytest.fixture
def openf1_url() -> str:
    return OPENF1_URL


@pytest.fixture
def jolpica_url() -> str:
    return JOLPICA_URL
