"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

import re

from ..constants import (
    DEFAULT_DRIVER_IMAGE,
    DEFAULT_TEAM_COLOUR,
    DRIVER_IMAGES,
    F1_RED,
    TEAM_COLOURS,
    TEAM_DISPLAY_NAMES,
)

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{3,8}$")


def normalize_team_color(team_colour: str | None) -> str:
    """Return a validated hex color string with '#' prefix, defaulting to F1_RED."""
    if team_colour:
        candidate = f"#{team_colour.lstrip('#')}"
        if _HEX_COLOR_RE.match(candidate):
            return candidate
    return F1_RED


def resolve_team_colour(team_name: str | None) -> str:
    """Look up a team colour (no '#') by exact name, then by substring either way."""
    if not team_name:
        return DEFAULT_TEAM_COLOUR
    if team_name in TEAM_COLOURS:
        return TEAM_COLOURS[team_name]
    lowered = team_name.lower()
    for key, colour in TEAM_COLOURS.items():
        if key.lower() in lowered or lowered in key.lower():
            return colour
    return DEFAULT_TEAM_COLOUR


def resolve_driver_image(driver_id: str | None) -> str:
    """Look up a headshot by Ergast driver id, then by contained surname key."""
    if not driver_id:
        return DEFAULT_DRIVER_IMAGE
    if driver_id in DRIVER_IMAGES:
        return DRIVER_IMAGES[driver_id]
    for key, url in DRIVER_IMAGES.items():
        if key in driver_id:
            return url
    return DEFAULT_DRIVER_IMAGE


def display_team_name(team_name: str) -> str:
    return TEAM_DISPLAY_NAMES.get(team_name, team_name)


def first_present(*values: str | None) -> str | None:
    """Return the first non-empty string, or None."""
    for value in values:
        if value:
            return value
    return None
