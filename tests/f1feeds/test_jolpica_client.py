"""Tests for the Jolpica (Ergast) client classes."""

from __future__ import annotations

import datetime

import httpx
import pytest
import respx

from f1feeds import AsyncJolpicaClient, F1FeedAPIError, F1FeedValidationError, JolpicaClient
from f1feeds.models import (
    ConstructorStanding,
    DriverStanding,
    QualifyingResult,
    Race,
    RaceResult,
)
from tests.conftest import (
    SAMPLE_CONSTRUCTOR_STANDING,
    SAMPLE_DRIVER_STANDING,
    SAMPLE_QUALIFYING_ROW,
    SAMPLE_RACE,
    SAMPLE_RACE_RESULT,
    mrdata_races,
    mrdata_round,
    mrdata_standings,
)

BASE_URL = "https://api.jolpi.ca/ergast/f1"


class TestJolpicaClient:
    @respx.mock
    def test_races(self) -> None:
        route = respx.get(f"{BASE_URL}/2024.json").mock(
            return_value=httpx.Response(200, json=mrdata_races([SAMPLE_RACE]))
        )
        with JolpicaClient() as ergast:
            races = ergast.races(2024)
        assert len(races) == 1
        assert isinstance(races[0], Race)
        assert races[0].round == 6
        assert races[0].date == datetime.date(2024, 5, 5)
        assert route.calls.last.request.url.params["limit"] == "100"

    @respx.mock
    def test_races_skips_malformed_entry(self) -> None:
        broken = {"season": "2024", "raceName": "No Round GP", "date": "2024-06-01"}
        respx.get(f"{BASE_URL}/2024.json").mock(
            return_value=httpx.Response(200, json=mrdata_races([broken, SAMPLE_RACE]))
        )
        with JolpicaClient() as ergast:
            races = ergast.races(2024)
        assert [r.race_name for r in races] == ["Miami Grand Prix"]

    @respx.mock
    def test_races_empty_season(self) -> None:
        respx.get(f"{BASE_URL}/2031.json").mock(
            return_value=httpx.Response(200, json=mrdata_races([], season="2031"))
        )
        with JolpicaClient() as ergast:
            assert ergast.races(2031) == []

    @respx.mock
    def test_races_unrecognized_payload(self) -> None:
        respx.get(f"{BASE_URL}/2024.json").mock(
            return_value=httpx.Response(200, json={"data": []})
        )
        with JolpicaClient() as ergast:
            with pytest.raises(F1FeedValidationError, match="MRData"):
                ergast.races(2024)

    @respx.mock
    def test_race_results(self) -> None:
        respx.get(f"{BASE_URL}/2024/1/results.json").mock(
            return_value=httpx.Response(200, json=mrdata_round("Results", [SAMPLE_RACE_RESULT]))
        )
        with JolpicaClient() as ergast:
            results = ergast.race_results(2024, 1)
        assert isinstance(results[0], RaceResult)
        assert results[0].time is not None
        assert results[0].time.time == "1:31:44.742"

    @respx.mock
    def test_sprint_results(self) -> None:
        respx.get(f"{BASE_URL}/2024/6/sprint.json").mock(
            return_value=httpx.Response(
                200, json=mrdata_round("SprintResults", [SAMPLE_RACE_RESULT], round="6"),
            )
        )
        with JolpicaClient() as ergast:
            results = ergast.sprint_results(2024, 6)
        assert results[0].points == 25.0

    @respx.mock
    def test_qualifying_results(self) -> None:
        respx.get(f"{BASE_URL}/2024/1/qualifying.json").mock(
            return_value=httpx.Response(
                200, json=mrdata_round("QualifyingResults", [SAMPLE_QUALIFYING_ROW]),
            )
        )
        with JolpicaClient() as ergast:
            results = ergast.qualifying_results(2024, 1)
        assert isinstance(results[0], QualifyingResult)
        assert results[0].q3 == "1:29.179"

    @respx.mock
    def test_unpublished_round_is_empty(self) -> None:
        respx.get(f"{BASE_URL}/2024/24/results.json").mock(
            return_value=httpx.Response(200, json=mrdata_races([]))
        )
        with JolpicaClient() as ergast:
            assert ergast.race_results(2024, 24) == []

    @respx.mock
    def test_driver_standings(self) -> None:
        respx.get(f"{BASE_URL}/2024/driverStandings.json").mock(
            return_value=httpx.Response(
                200, json=mrdata_standings("DriverStandings", [SAMPLE_DRIVER_STANDING]),
            )
        )
        with JolpicaClient() as ergast:
            standings = ergast.driver_standings(2024)
        assert isinstance(standings[0], DriverStanding)
        assert standings[0].points == 575.0
        assert standings[0].constructors[0].name == "Red Bull"

    @respx.mock
    def test_constructor_standings(self) -> None:
        respx.get(f"{BASE_URL}/2024/constructorStandings.json").mock(
            return_value=httpx.Response(
                200, json=mrdata_standings("ConstructorStandings", [SAMPLE_CONSTRUCTOR_STANDING]),
            )
        )
        with JolpicaClient() as ergast:
            standings = ergast.constructor_standings(2024)
        assert isinstance(standings[0], ConstructorStanding)
        assert standings[0].wins == 21

    @respx.mock
    def test_standings_before_season_start(self) -> None:
        respx.get(f"{BASE_URL}/2031/driverStandings.json").mock(
            return_value=httpx.Response(
                200, json={"MRData": {"StandingsTable": {"season": "2031", "StandingsLists": []}}},
            )
        )
        with JolpicaClient() as ergast:
            assert ergast.driver_standings(2031) == []

    @respx.mock
    def test_api_error(self) -> None:
        respx.get(f"{BASE_URL}/2024/1/results.json").mock(
            return_value=httpx.Response(500, text="boom")
        )
        with JolpicaClient() as ergast:
            with pytest.raises(F1FeedAPIError) as exc_info:
                ergast.race_results(2024, 1)
        assert exc_info.value.status_code == 500


class TestAsyncJolpicaClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_races(self) -> None:
        respx.get(f"{BASE_URL}/2024.json").mock(
            return_value=httpx.Response(200, json=mrdata_races([SAMPLE_RACE]))
        )
        async with AsyncJolpicaClient() as ergast:
            races = await ergast.races(2024)
        assert races[0].sprint is not None

    @respx.mock
    @pytest.mark.asyncio
    async def test_qualifying_results(self) -> None:
        respx.get(f"{BASE_URL}/2024/1/qualifying.json").mock(
            return_value=httpx.Response(
                200, json=mrdata_round("QualifyingResults", [SAMPLE_QUALIFYING_ROW]),
            )
        )
        async with AsyncJolpicaClient() as ergast:
            results = await ergast.qualifying_results(2024, 1)
        assert results[0].driver.code == "VER"

    @respx.mock
    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        respx.get(f"{BASE_URL}/2024/30/sprint.json").mock(
            return_value=httpx.Response(404, text="Not Found")
        )
        async with AsyncJolpicaClient() as ergast:
            with pytest.raises(F1FeedAPIError) as exc_info:
                await ergast.sprint_results(2024, 30)
        assert exc_info.value.is_not_found
