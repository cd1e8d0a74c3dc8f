"""OpenF1 live meetings/sessions schedule adapter."""

from __future__ import annotations

import asyncio
import re
from datetime import datetime, timezone

from f1feeds import AsyncOpenF1Client, F1FeedError
from f1feeds.models import Meeting, Session

from ..api_logging import get_logger, log_api_call
from ..config import get_settings
from .base import ScheduleSource
from .errors import FetchFailure, MalformedRecord
from .types import (
    EMPTY_SESSION,
    SESSION_KINDS,
    UNKNOWN_KEY,
    NormalizedRace,
    RealKey,
    SessionInfo,
    SessionKind,
)

_PRACTICE_RE = re.compile(r"practice\s*(\d)")
_PRACTICE_KINDS = {"1": SessionKind.FP1, "2": SessionKind.FP2, "3": SessionKind.FP3}


def match_session_kind(session_name: str | None) -> SessionKind | None:
    """Map a free-text OpenF1 session name onto a weekend slot.

    "Sprint Qualifying" contains both "Sprint" and "Qualifying", so each of
    those words only matches on its own when the other is absent.
    """
    if not session_name:
        return None
    lowered = session_name.strip().lower()

    practice = _PRACTICE_RE.search(lowered)
    if practice:
        return _PRACTICE_KINDS.get(practice.group(1))

    is_sprint = "sprint" in lowered
    is_qualifying = "qualifying" in lowered or "shootout" in lowered
    if is_sprint and is_qualifying:
        return SessionKind.SPRINT_QUALIFYING
    if is_qualifying:
        return SessionKind.QUALIFYING
    if is_sprint:
        return SessionKind.SPRINT
    if "race" in lowered:
        return SessionKind.RACE
    return None


def _as_utc(moment: datetime | None) -> datetime | None:
    if moment is None:
        return None
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _calendar_position(meeting: Meeting) -> tuple[bool, datetime]:
    start = _as_utc(meeting.date_start)
    return (start is None, start or datetime.max.replace(tzinfo=timezone.utc))


def _session_info(session: Session) -> SessionInfo:
    key = session.session_key
    return SessionInfo(
        time=_as_utc(session.date_start),
        key=RealKey(key) if key is not None and key >= 0 else UNKNOWN_KEY,
    )


def build_meeting_race(
    meeting: Meeting,
    sessions: list[Session],
    round: int,
    year: int,
) -> NormalizedRace:
    """Normalize one meeting and its sessions; ``round`` comes from calendar position."""
    if meeting.meeting_key is None:
        raise MalformedRecord(f"meeting {meeting.meeting_name!r} has no meeting_key")

    slots: dict[SessionKind, SessionInfo] = {kind: EMPTY_SESSION for kind in SESSION_KINDS}
    for session in sessions:
        kind = match_session_kind(session.session_name)
        if kind is None:
            continue
        if slots[kind] is not EMPTY_SESSION:
            get_logger().warning(
                "SKIP: duplicate %s session %r in meeting %s",
                kind.value, session.session_name, meeting.meeting_key,
            )
            continue
        slots[kind] = _session_info(session)

    name = meeting.meeting_name or meeting.meeting_official_name or f"Round {round}"
    circuit = meeting.circuit_short_name or meeting.location or name
    city = meeting.location or circuit
    country = meeting.country_name or city

    return NormalizedRace(
        id=f"{year}-m{meeting.meeting_key}",
        name=name,
        circuit=circuit,
        city=city,
        country=country,
        round=round,
        year=year,
        utc_start=slots[SessionKind.RACE].time,
        sessions=slots,
    )


class OpenF1ScheduleSource(ScheduleSource):
    """Live calendar: real session keys, free-text session names, no round numbers.

    Rounds are assigned by meeting start date; undated meetings go last.
    """

    name = "OpenF1"

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        settings = get_settings()
        self._base_url = base_url or settings.openf1_base_url
        self._timeout = timeout or settings.request_timeout

    @log_api_call
    async def get_season(self, year: int) -> list[NormalizedRace]:
        try:
            async with AsyncOpenF1Client(self._base_url, self._timeout) as f1:
                meetings, sessions = await asyncio.gather(
                    f1.meetings(year=year),
                    f1.sessions(year=year),
                )
        except F1FeedError as exc:
            raise FetchFailure(
                f"Failed to fetch meetings for {year}: {exc}",
                status_code=getattr(exc, "status_code", None),
            ) from exc

        by_meeting: dict[int, list[Session]] = {}
        for session in sessions:
            if session.meeting_key is not None:
                by_meeting.setdefault(session.meeting_key, []).append(session)

        championship = sorted(
            (m for m in meetings if not m.is_testing),
            key=_calendar_position,
        )
        normalized: list[NormalizedRace] = []
        for meeting in championship:
            try:
                race = build_meeting_race(
                    meeting,
                    by_meeting.get(meeting.meeting_key or -1, []),
                    round=len(normalized) + 1,
                    year=year,
                )
            except MalformedRecord as exc:
                get_logger().warning("SKIP: OpenF1 meeting in %s: %s", year, exc)
                continue
            normalized.append(race)
        return normalized
