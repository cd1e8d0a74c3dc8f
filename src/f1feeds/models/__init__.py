"""f1feeds data models for the OpenF1 and Jolpica APIs."""

from f1feeds.models.driver import Driver
from f1feeds.models.meeting import Meeting
from f1feeds.models.results import Constructor, ErgastDriver, QualifyingResult, RaceResult, ResultTime
from f1feeds.models.schedule import Circuit, Location, Race, SessionSlot
from f1feeds.models.session import Session
from f1feeds.models.session_result import SessionResult
from f1feeds.models.standings import ConstructorStanding, DriverStanding

__all__ = [
    "Circuit",
    "Constructor",
    "ConstructorStanding",
    "Driver",
    "DriverStanding",
    "ErgastDriver",
    "Location",
    "Meeting",
    "QualifyingResult",
    "Race",
    "RaceResult",
    "ResultTime",
    "Session",
    "SessionResult",
    "SessionSlot",
]
