"""Data layer — schedule source factory and re-exports."""

from __future__ import annotations

from .base import ScheduleSource
from .errors import FetchFailure, MalformedRecord
from .source import DataSource, get_active_source
from .types import (
    SESSION_KINDS,
    UNKNOWN_KEY,
    ConstructorStandingRow,
    DriverStandingRow,
    NormalizedRace,
    RealKey,
    SessionInfo,
    SessionKey,
    SessionKind,
    SessionResult,
    SyntheticKey,
    UnknownKey,
)


def get_schedule_source(source: DataSource | None = None) -> ScheduleSource:
    """Return the schedule adapter for ``source`` (default: the user's selection)."""
    if (source or get_active_source()) == DataSource.OPENF1:
        from .openf1_repo import OpenF1ScheduleSource

        return OpenF1ScheduleSource()
    from .jolpica_repo import JolpicaScheduleSource

    return JolpicaScheduleSource()


__all__ = [
    "SESSION_KINDS",
    "UNKNOWN_KEY",
    "ConstructorStandingRow",
    "DataSource",
    "DriverStandingRow",
    "FetchFailure",
    "MalformedRecord",
    "NormalizedRace",
    "RealKey",
    "ScheduleSource",
    "SessionInfo",
    "SessionKey",
    "SessionKind",
    "SessionResult",
    "SyntheticKey",
    "UnknownKey",
    "get_active_source",
    "get_schedule_source",
]
