"""Classification models for the Jolpica (Ergast) API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ErgastDriver(BaseModel):
    """Driver as embedded in results and standings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver_id: str = Field(alias="driverId")
    permanent_number: int | None = Field(default=None, alias="permanentNumber")
    code: str | None = None
    given_name: str = Field(default="", alias="givenName")
    family_name: str = Field(default="", alias="familyName")
    nationality: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.given_name} {self.family_name}".strip()


class Constructor(BaseModel):
    """Team entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    constructor_id: str = Field(alias="constructorId")
    name: str = ""
    nationality: str | None = None


class ResultTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    millis: int | None = None
    time: str | None = None


class RaceResult(BaseModel):
    """Race or sprint classification row."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int | None = None
    position: int | None = None
    position_text: str | None = Field(default=None, alias="positionText")
    points: float = 0.0
    driver: ErgastDriver = Field(alias="Driver")
    constructor: Constructor | None = Field(default=None, alias="Constructor")
    grid: int | None = None
    laps: int | None = None
    status: str | None = None
    time: ResultTime | None = Field(default=None, alias="Time")

    @property
    def is_classified(self) -> bool:
        """Retired, disqualified and excluded drivers carry a letter instead of a rank."""
        if self.position_text is None:
            return self.position is not None
        return self.position_text.isdigit()


class QualifyingResult(BaseModel):
    """Qualifying classification row with per-segment lap times."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int | None = None
    position: int | None = None
    driver: ErgastDriver = Field(alias="Driver")
    constructor: Constructor | None = Field(default=None, alias="Constructor")
    q1: str | None = Field(default=None, alias="Q1")
    q2: str | None = Field(default=None, alias="Q2")
    q3: str | None = Field(default=None, alias="Q3")
