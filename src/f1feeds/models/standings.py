"""Championship standings models for the Jolpica (Ergast) API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from f1feeds.models.results import Constructor, ErgastDriver


class DriverStanding(BaseModel):
    """Driver championship standing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    position: int | None = None
    position_text: str | None = Field(default=None, alias="positionText")
    points: float = 0.0
    wins: int = 0
    driver: ErgastDriver = Field(alias="Driver")
    constructors: list[Constructor] = Field(default_factory=list, alias="Constructors")


class ConstructorStanding(BaseModel):
    """Team championship standing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    position: int | None = None
    position_text: str | None = Field(default=None, alias="positionText")
    points: float = 0.0
    wins: int = 0
    constructor: Constructor = Field(alias="Constructor")
