"""User display preferences."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

CLOCK_PARAM = "clock"


@dataclass(frozen=True)
class DisplaySettings:
    """The one persisted preference: 24-hour (default) or 12-hour clock."""

    use_24h: bool = True

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> DisplaySettings:
        """Read the preference from URL query parameters."""
        return cls(use_24h=params.get(CLOCK_PARAM, "24h") != "12h")

    def store(self, params: MutableMapping[str, str]) -> None:
        """Write the preference back into URL query parameters."""
        params[CLOCK_PARAM] = "24h" if self.use_24h else "12h"
