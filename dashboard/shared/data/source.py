"""Data source selection for the F1 dashboard."""

from __future__ import annotations

from enum import Enum

import streamlit as st

from ..config import get_settings


class DataSource(str, Enum):
    """Supported schedule providers."""

    JOLPICA = "Jolpica"
    OPENF1 = "OpenF1"


def get_active_source() -> DataSource:
    """Return the currently selected data source from session state."""
    default = get_settings().default_source
    value = st.session_state.get("data_source", default)
    try:
        return DataSource(value)
    except ValueError:
        return DataSource.JOLPICA
