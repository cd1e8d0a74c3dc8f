"""Formatting helpers for the F1 dashboard."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .settings import DisplaySettings


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff or '\u2014' if None."""
    if seconds is None:
        return "\u2014"
    mins, secs = divmod(seconds, 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_race_duration(seconds: float | None) -> str:
    """Format a race distance time as h:mm:ss.fff."""
    if seconds is None:
        return ""
    hours, rest = divmod(seconds, 3600)
    mins, secs = divmod(rest, 60)
    return f"{int(hours)}:{int(mins):02d}:{secs:06.3f}"


def format_gap(seconds: float) -> str:
    return f"+{seconds:.3f}s"


def format_points(points: float) -> str:
    """Drop the trailing .0 from whole-number points."""
    return f"{points:g}"


def format_countdown(remaining: timedelta) -> str:
    """Render time left as 'Xd Yh Zm', or 'Hh Mm Ss' inside the last day."""
    total_seconds = int(remaining.total_seconds())
    if total_seconds <= 0:
        return "0h 0m 0s"
    days, rest = divmod(total_seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    return f"{hours}h {minutes}m {seconds}s"


def format_session_time(moment: datetime | None, settings: DisplaySettings) -> str:
    """Render a UTC timestamp using the 12h/24h clock preference, or 'TBD'."""
    if moment is None:
        return "TBD"
    moment = moment.astimezone(timezone.utc)
    if settings.use_24h:
        clock = f"{moment:%H:%M}"
    else:
        clock = moment.strftime("%I:%M %p").lstrip("0")
    return f"{moment:%a %d %b} {clock} UTC"
