"""Cached page-level fetchers. Each runs one async service call to completion."""

from __future__ import annotations

import asyncio

import streamlit as st

from .config import get_settings
from .data import DataSource, get_schedule_source
from .data.types import NormalizedRace, SessionKey, SessionKind, SessionResult
from .services.results import fetch_live_session_results, fetch_session_results
from .services.schedule import HomeData, load_home_data, normalize_season_schedule

# Upstream data changes at most a few times per weekend; revalidate hourly.
_CACHE_TTL = get_settings().cache_ttl_seconds


@st.cache_data(ttl=_CACHE_TTL, show_spinner=False)
def fetch_home(year: int, source: DataSource) -> HomeData:
    return asyncio.run(load_home_data(year, get_schedule_source(source)))


@st.cache_data(ttl=_CACHE_TTL, show_spinner=False)
def fetch_schedule(year: int, source: DataSource) -> list[NormalizedRace]:
    return asyncio.run(normalize_season_schedule(year, get_schedule_source(source)))


@st.cache_data(ttl=_CACHE_TTL, show_spinner=False)
def fetch_results(year: int, round: int, kind: SessionKind) -> list[SessionResult]:
    return asyncio.run(fetch_session_results(year, round, kind))


@st.cache_data(ttl=_CACHE_TTL, show_spinner=False)
def fetch_live_results(session_key: SessionKey, kind: SessionKind) -> list[SessionResult]:
    return asyncio.run(fetch_live_session_results(session_key, kind))
