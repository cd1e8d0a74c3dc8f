"""Session result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SessionResult(BaseModel):
    """Final standing after a session.

    Qualifying sessions report ``duration`` and ``gap_to_leader`` as a
    three-element list (Q1, Q2, Q3); every other session reports scalars.
    """

    model_config = ConfigDict(frozen=True)

    dnf: bool = False
    dns: bool = False
    dsq: bool = False
    driver_number: int | None = None
    duration: float | list[float | None] | None = None
    gap_to_leader: float | str | list[float | str | None] | None = None
    meeting_key: int | None = None
    number_of_laps: int | None = None
    points: float | None = None
    position: int | None = None
    session_key: int | None = None
    # Older payloads embed driver fields directly on the result row.
    broadcast_name: str | None = None
    full_name: str | None = None
    name_acronym: str | None = None
    team_name: str | None = None
