"""Session Results — classification for any session of the selected season."""

from __future__ import annotations

from datetime import datetime, timezone

import streamlit as st

from shared import (
    SESSION_LABELS,
    FetchFailure,
    RealKey,
    SessionKind,
    fetch_live_results,
    fetch_results,
    fetch_schedule,
    format_points,
    format_session_time,
    has_started,
    render_sidebar,
)

st.set_page_config(page_title="Session Results", page_icon="\U0001f3c1", layout="wide")

selection = render_sidebar()

st.title("Session Results")

with st.spinner("Loading schedule..."):
    try:
        races = fetch_schedule(selection.year, selection.source)
    except FetchFailure as exc:
        st.error(f"Failed to load the {selection.year} schedule: {exc}")
        st.stop()

now = datetime.now(timezone.utc)
started = [r for r in races if has_started(r, now)] or races
if not started:
    st.info(f"No races published for {selection.year} yet.")
    st.stop()

# ── Race / session selection ─────────────────────────────────────────────────

race_ids = [r.id for r in started]
preferred_race = st.session_state.get("results_race_id")
race_index = race_ids.index(preferred_race) if preferred_race in race_ids else len(race_ids) - 1

col_race, col_session = st.columns(2)
with col_race:
    race = st.selectbox(
        "Grand Prix",
        started,
        index=race_index,
        format_func=lambda r: f"R{r.round} — {r.name}",
    )

kinds = [kind for kind in SessionKind if race.session(kind).is_scheduled] or [SessionKind.RACE]
preferred_kind = st.session_state.get("results_kind")
kind_values = [k.value for k in kinds]
kind_index = kind_values.index(preferred_kind) if preferred_kind in kind_values else len(kinds) - 1

with col_session:
    kind = st.selectbox(
        "Session",
        kinds,
        index=kind_index,
        format_func=lambda k: SESSION_LABELS[k],
    )

st.session_state["results_race_id"] = race.id
st.session_state["results_kind"] = kind.value

info = race.session(kind)
st.caption(
    f"{race.circuit} • {race.city}, {race.country} • "
    f"{format_session_time(info.time or race.utc_start, selection.display)}"
)

# ── Classification ───────────────────────────────────────────────────────────

with st.spinner("Loading results..."):
    try:
        if isinstance(info.key, RealKey):
            results = fetch_live_results(info.key, kind)
        else:
            results = fetch_results(race.year, race.round, kind)
    except FetchFailure as exc:
        st.error(f"Failed to load results: {exc}")
        st.stop()

if not results:
    if kind.is_practice and not isinstance(info.key, RealKey):
        st.info("Practice session results are not available.")
    else:
        st.info("No results available for this session yet.")
    st.stop()

show_points = kind in (SessionKind.SPRINT, SessionKind.RACE)

table = []
for r in results:
    row = {
        "": r.headshot_url,
        "Pos": r.position if r.position is not None else "-",
        "No.": r.driver_number,
        "Driver": r.driver_name,
        "Code": r.driver_acronym,
        "Team": r.team_name,
        "Time": r.time,
    }
    if show_points:
        row["Pts"] = format_points(r.points)
    table.append(row)

st.dataframe(
    table,
    column_config={"": st.column_config.ImageColumn(width="small")},
    hide_index=True,
    use_container_width=True,
    height=min(38 + 35 * len(table), 800),
)

winner = results[0]
if winner.position == 1:
    st.markdown(
        f"<span style='color:#{winner.team_colour}'>■</span> "
        f"**{winner.driver_name}** ({winner.team_name}) tops {SESSION_LABELS[kind]}.",
        unsafe_allow_html=True,
    )
