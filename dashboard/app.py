"""F1 Season Dashboard — schedule, live countdown and standings (Streamlit + Plotly)."""

from __future__ import annotations

from datetime import datetime, timezone

import plotly.graph_objects as go
import streamlit as st

from shared import (
    PLOTLY_LAYOUT_DEFAULTS,
    SESSION_LABELS,
    DisplaySettings,
    FetchFailure,
    NormalizedRace,
    fetch_home,
    format_countdown,
    format_points,
    format_session_time,
    latest_finished_session,
    next_session,
    normalize_team_color,
    render_sidebar,
    weekend_sessions,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Season Dashboard",
    page_icon="\U0001f3ce️",
    layout="wide",
)


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("F1 Season Dashboard")

selection = render_sidebar()
display = selection.display


# ── Fetch season ─────────────────────────────────────────────────────────────

with st.spinner("Loading season..."):
    try:
        home = fetch_home(selection.year, selection.source)
    except FetchFailure as exc:
        st.error(f"Failed to load the {selection.year} schedule: {exc}")
        st.stop()

races = home.races
if not races:
    st.info(f"No races published for {selection.year} yet.")
    st.stop()

schedule_col, standings_col = st.columns([3, 1], gap="large")


# ── Next session countdown ───────────────────────────────────────────────────


@st.fragment(run_every=1)
def render_next_session(races: list[NormalizedRace], display: DisplaySettings) -> None:
    now = datetime.now(timezone.utc)
    upcoming = next_session(races, now)
    if upcoming is None:
        st.info("Season complete. No upcoming sessions.")
        return

    race = upcoming.race
    left, right = st.columns([2, 1])
    with left:
        st.caption(f"ROUND {race.round}")
        st.markdown(f"## Next up: {race.name}")
        st.markdown(f"**{race.circuit}** • {race.city}, {race.country}")
    with right:
        st.metric(
            f"{SESSION_LABELS[upcoming.kind]} in",
            format_countdown(upcoming.time - now),
        )
        st.caption(format_session_time(upcoming.time, display))

    with st.expander("Weekend Schedule"):
        for row in weekend_sessions(race, now):
            label_col, countdown_col, time_col = st.columns([2, 2, 3])
            label_col.markdown(f"**{SESSION_LABELS[row.kind]}**")
            if row.upcoming:
                countdown_col.markdown(f"`{format_countdown(row.time - now)}`")
            time_col.markdown(format_session_time(row.time, display))


with schedule_col:
    render_next_session(races, display)

    # ── Latest results shortcut ──────────────────────────────────────────────

    latest = latest_finished_session(races, datetime.now(timezone.utc))
    if latest is not None:
        st.session_state["results_race_id"] = latest.race.id
        st.session_state["results_kind"] = latest.kind.value
        st.page_link(
            "pages/2_Results.py",
            label=f"Latest results: {latest.race.name} — {SESSION_LABELS[latest.kind]}",
            icon="\U0001f3c1",
        )

    # ── Season calendar ──────────────────────────────────────────────────────

    st.subheader(f"{selection.year} Calendar")
    query = st.text_input("Search", placeholder="Grand Prix, circuit, city or country")
    needle = query.strip().lower()
    visible = [
        race for race in races
        if not needle
        or any(needle in field.lower() for field in (race.name, race.circuit, race.city, race.country))
    ]

    if not visible:
        st.warning("No races match your search.")
    else:
        st.dataframe(
            [
                {
                    "Round": race.round,
                    "Grand Prix": race.name,
                    "Circuit": race.circuit,
                    "Location": f"{race.city}, {race.country}",
                    "Race start": format_session_time(race.utc_start, display),
                    "Sprint": "✓" if race.has_sprint else "",
                }
                for race in visible
            ],
            hide_index=True,
            use_container_width=True,
        )


# ── Standings ────────────────────────────────────────────────────────────────


def _standings_chart(labels: list[str], points: list[float], colours: list[str]) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=points,
        y=labels,
        orientation="h",
        marker=dict(color=colours),
        text=[format_points(p) for p in points],
        textposition="outside",
        hovertemplate="%{y}: %{x} pts<extra></extra>",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        height=max(300, 28 * len(labels)),
        yaxis=dict(autorange="reversed"),
        xaxis=dict(showgrid=False),
        showlegend=False,
    )
    return fig


with standings_col:
    st.subheader(f"{selection.year} Standings")
    drivers_tab, constructors_tab = st.tabs(["Drivers", "Constructors"])

    with drivers_tab:
        if not home.driver_standings:
            st.caption("Driver standings are unavailable right now.")
        else:
            rows = home.driver_standings
            st.plotly_chart(
                _standings_chart(
                    [r.driver_code for r in rows],
                    [r.points for r in rows],
                    [normalize_team_color(r.team_colour) for r in rows],
                ),
                use_container_width=True,
            )
            st.dataframe(
                [
                    {
                        "": r.headshot_url,
                        "Pos": r.position if r.position is not None else "-",
                        "Driver": r.driver_name,
                        "Team": r.team_name,
                        "Pts": format_points(r.points),
                    }
                    for r in rows
                ],
                column_config={"": st.column_config.ImageColumn(width="small")},
                hide_index=True,
                use_container_width=True,
            )

    with constructors_tab:
        if not home.constructor_standings:
            st.caption("Constructor standings are unavailable right now.")
        else:
            rows = home.constructor_standings
            st.plotly_chart(
                _standings_chart(
                    [r.name for r in rows],
                    [r.points for r in rows],
                    [normalize_team_color(r.team_colour) for r in rows],
                ),
                use_container_width=True,
            )
            st.dataframe(
                [
                    {
                        "Pos": r.position if r.position is not None else "-",
                        "Team": r.display_name,
                        "Wins": r.wins,
                        "Pts": format_points(r.points),
                    }
                    for r in rows
                ],
                hide_index=True,
                use_container_width=True,
            )
