"""Shared sidebar rendering: season, schedule source and clock preference."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

import streamlit as st

from .data.source import DataSource, get_active_source
from .settings import DisplaySettings

FIRST_SEASON = 2018


@dataclass(frozen=True)
class SidebarSelection:
    """Result of the sidebar controls."""

    year: int
    source: DataSource
    display: DisplaySettings


def render_sidebar() -> SidebarSelection:
    """Render the season/source/clock controls and persist the clock choice in the URL."""
    current_year = datetime.date.today().year
    years = list(range(current_year, FIRST_SEASON - 1, -1))
    selected_year = st.sidebar.selectbox("Season", years)

    source_names = [s.value for s in DataSource]
    active = get_active_source()
    selected_source = st.sidebar.radio(
        "Schedule source",
        source_names,
        index=source_names.index(active.value),
        help="Jolpica has every season with official rounds; OpenF1 has live session keys from 2023.",
    )
    st.session_state["data_source"] = selected_source

    stored = DisplaySettings.from_params(st.query_params)
    use_24h = st.sidebar.toggle("24-hour clock", value=stored.use_24h)
    display = DisplaySettings(use_24h=use_24h)
    if display != stored:
        display.store(st.query_params)

    return SidebarSelection(
        year=selected_year,
        source=DataSource(selected_source),
        display=display,
    )
