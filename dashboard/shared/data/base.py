"""Abstract base for season schedule sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import NormalizedRace


class ScheduleSource(ABC):
    """Turns one provider's calendar into normalized races.

    Implementations raise ``FetchFailure`` when the provider cannot be read
    and skip (never raise for) individual malformed records.
    """

    name: str = ""

    @abstractmethod
    async def get_season(self, year: int) -> list[NormalizedRace]: ...
