"""Season schedule models for the Jolpica (Ergast) API."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Geographic location of a circuit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lat: float | None = None
    long: float | None = None
    locality: str | None = None
    country: str | None = None


class Circuit(BaseModel):
    """Circuit hosting a round."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    circuit_id: str | None = Field(default=None, alias="circuitId")
    circuit_name: str | None = Field(default=None, alias="circuitName")
    url: str | None = None
    location: Location = Field(default_factory=Location, alias="Location")


class SessionSlot(BaseModel):
    """Date and optional UTC time-of-day of one weekend session."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    time: str | None = None


class Race(BaseModel):
    """One round of a season calendar."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    season: int
    round: int
    race_name: str = Field(alias="raceName")
    url: str | None = None
    circuit: Circuit = Field(default_factory=Circuit, alias="Circuit")
    date: datetime.date
    time: str | None = None
    first_practice: SessionSlot | None = Field(default=None, alias="FirstPractice")
    second_practice: SessionSlot | None = Field(default=None, alias="SecondPractice")
    third_practice: SessionSlot | None = Field(default=None, alias="ThirdPractice")
    qualifying: SessionSlot | None = Field(default=None, alias="Qualifying")
    sprint_qualifying: SessionSlot | None = Field(default=None, alias="SprintQualifying")
    sprint_shootout: SessionSlot | None = Field(default=None, alias="SprintShootout")
    sprint: SessionSlot | None = Field(default=None, alias="Sprint")
