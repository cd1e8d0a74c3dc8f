"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import F1_RED, PLOTLY_LAYOUT_DEFAULTS, SESSION_LABELS
from .formatters import (
    format_countdown,
    format_gap,
    format_lap_time,
    format_points,
    format_race_duration,
    format_session_time,
)
from .settings import DisplaySettings

# --- Data layer ---
from .data import (
    DataSource,
    FetchFailure,
    NormalizedRace,
    RealKey,
    SessionKind,
    SessionResult,
    get_active_source,
    get_schedule_source,
)

# --- Service layer ---
from .services import (
    HomeData,
    has_started,
    latest_finished_session,
    next_race,
    next_session,
    normalize_team_color,
    weekend_sessions,
)

# --- Cached fetchers & UI components ---
from .fetchers import fetch_home, fetch_live_results, fetch_results, fetch_schedule
from .sidebar import SidebarSelection, render_sidebar

__all__ = [
    "DataSource",
    "DisplaySettings",
    "F1_RED",
    "FetchFailure",
    "HomeData",
    "NormalizedRace",
    "PLOTLY_LAYOUT_DEFAULTS",
    "RealKey",
    "SESSION_LABELS",
    "SessionKind",
    "SessionResult",
    "SidebarSelection",
    "fetch_home",
    "fetch_live_results",
    "fetch_results",
    "fetch_schedule",
    "format_countdown",
    "format_gap",
    "format_lap_time",
    "format_points",
    "format_race_duration",
    "format_session_time",
    "get_active_source",
    "get_schedule_source",
    "has_started",
    "latest_finished_session",
    "next_race",
    "next_session",
    "normalize_team_color",
    "render_sidebar",
    "weekend_sessions",
]
