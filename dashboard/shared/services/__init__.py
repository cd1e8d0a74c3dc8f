"""Service layer — business logic for the F1 dashboard."""

from .common import (
    display_team_name,
    normalize_team_color,
    resolve_driver_image,
    resolve_team_colour,
)
from .resolver import (
    ResolvedSession,
    WeekendSession,
    has_started,
    latest_finished_session,
    next_race,
    next_session,
    weekend_sessions,
)
from .results import fetch_live_session_results, fetch_session_results, sort_results
from .schedule import HomeData, load_home_data, normalize_season_schedule
from .standings import fetch_constructor_standings, fetch_driver_standings

__all__ = [
    "HomeData",
    "ResolvedSession",
    "WeekendSession",
    "display_team_name",
    "fetch_constructor_standings",
    "fetch_driver_standings",
    "fetch_live_session_results",
    "fetch_session_results",
    "has_started",
    "latest_finished_session",
    "load_home_data",
    "next_race",
    "next_session",
    "normalize_season_schedule",
    "normalize_team_color",
    "resolve_driver_image",
    "resolve_team_colour",
    "sort_results",
    "weekend_sessions",
]
