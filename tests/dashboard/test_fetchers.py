"""Tests for shared/fetchers.py and shared/sidebar.py — Streamlit glue."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

from shared.data.source import DataSource
from shared.data.types import RealKey, SessionKind
from shared.fetchers import fetch_home, fetch_live_results, fetch_results, fetch_schedule
from shared.services.schedule import HomeData
from shared.settings import CLOCK_PARAM
from shared.sidebar import render_sidebar


class TestFetchers:
    def test_fetch_results_runs_service(self):
        service = AsyncMock(return_value=[])
        with patch("shared.fetchers.fetch_session_results", service):
            assert fetch_results(2024, 5, SessionKind.RACE) == []
        service.assert_awaited_once_with(2024, 5, SessionKind.RACE)

    def test_fetch_live_results_runs_service(self):
        service = AsyncMock(return_value=[])
        with patch("shared.fetchers.fetch_live_session_results", service):
            fetch_live_results(RealKey(9472), SessionKind.QUALIFYING)
        service.assert_awaited_once_with(RealKey(9472), SessionKind.QUALIFYING)

    def test_fetch_schedule_uses_selected_source(self):
        service = AsyncMock(return_value=[])
        source = MagicMock()
        with (
            patch("shared.fetchers.normalize_season_schedule", service),
            patch("shared.fetchers.get_schedule_source", return_value=source) as factory,
        ):
            assert fetch_schedule(2024, DataSource.OPENF1) == []
        factory.assert_called_once_with(DataSource.OPENF1)
        service.assert_awaited_once_with(2024, source)

    def test_fetch_home(self):
        home = HomeData(races=[], driver_standings=[], constructor_standings=[])
        with (
            patch("shared.fetchers.load_home_data", AsyncMock(return_value=home)),
            patch("shared.fetchers.get_schedule_source"),
        ):
            assert fetch_home(2024, DataSource.JOLPICA) is home


class TestRenderSidebar:
    def _streamlit(self, year=2024, source="OpenF1", use_24h=True, params=None):
        st = MagicMock()
        st.sidebar.selectbox.return_value = year
        st.sidebar.radio.return_value = source
        st.sidebar.toggle.return_value = use_24h
        st.session_state = {}
        st.query_params = {} if params is None else params
        return st

    def test_selection(self):
        st = self._streamlit()
        with patch("shared.sidebar.st", st):
            selection = render_sidebar()
        assert selection.year == 2024
        assert selection.source is DataSource.OPENF1
        assert selection.display.use_24h
        assert st.session_state["data_source"] == "OpenF1"

    def test_clock_choice_persisted(self):
        st = self._streamlit(use_24h=False)
        with patch("shared.sidebar.st", st):
            selection = render_sidebar()
        assert not selection.display.use_24h
        assert st.query_params == {CLOCK_PARAM: "12h"}

    def test_clock_read_from_url(self):
        st = self._streamlit(use_24h=False, params={CLOCK_PARAM: "12h"})
        with patch("shared.sidebar.st", st):
            render_sidebar()
        _, kwargs = st.sidebar.toggle.call_args
        assert kwargs["value"] is False
