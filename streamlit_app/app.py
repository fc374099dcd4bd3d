"""Workout Log — Streamlit front end.

Run with:
    streamlit run streamlit_app/app.py

Set WORKOUT_LOG_HOME_LAT / WORKOUT_LOG_HOME_LNG to give the page a position
fix; without them the session runs in list-only mode.
"""

from __future__ import annotations

import logging

import pydeck as pdk
import streamlit as st

from workout_log.config import (
    DATA_DIR,
    HOME_LATITUDE,
    HOME_LONGITUDE,
    LOG_LEVEL,
    MAP_ZOOM_LEVEL,
    STORAGE_KEY,
)
from workout_log.exceptions import ValidationError
from workout_log.models.coordinates import Coordinates
from workout_log.models.enums import POPUP_MAX_WIDTH, POPUP_MIN_WIDTH, SessionState
from workout_log.persistence import JsonFileStore, WorkoutRepository
from workout_log.session import FixedPositionSensor, SessionController, format_entry

from helpers import (
    KIND_OPTIONS,
    BufferedNotifier,
    StreamlitMap,
    StreamlitRenderer,
    workouts_frame,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Workout Log",
    page_icon="🗺️",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Session wiring
# ---------------------------------------------------------------------------


def _new_session() -> None:
    """Build collaborators and a controller, then bring up the map."""
    map_surface = StreamlitMap()
    renderer = StreamlitRenderer()
    notifier = BufferedNotifier()
    controller = SessionController(
        WorkoutRepository(JsonFileStore(DATA_DIR), key=STORAGE_KEY),
        renderer,
        notifier,
        map_surface=map_surface,
        sensor=FixedPositionSensor(HOME_LATITUDE, HOME_LONGITUDE),
        zoom_level=MAP_ZOOM_LEVEL,
    )
    controller.start()
    st.session_state["map_surface"] = map_surface
    st.session_state["renderer"] = renderer
    st.session_state["notifier"] = notifier
    st.session_state["controller"] = controller


if "controller" not in st.session_state:
    _new_session()

controller: SessionController = st.session_state["controller"]
map_surface: StreamlitMap = st.session_state["map_surface"]
renderer: StreamlitRenderer = st.session_state["renderer"]
notifier: BufferedNotifier = st.session_state["notifier"]


def _reset() -> None:
    controller.reset()
    for key in ("controller", "map_surface", "renderer", "notifier"):
        st.session_state.pop(key, None)


def _submit() -> None:
    kind = st.session_state[renderer.widget_key("kind")]
    extra_key = "elevation" if renderer.show_elevation else "cadence"
    try:
        controller.on_form_submitted(
            kind,
            st.session_state.get(renderer.widget_key("distance"), ""),
            st.session_state.get(renderer.widget_key("duration"), ""),
            st.session_state.get(renderer.widget_key(extra_key), ""),
        )
    except ValidationError:
        # Already reported through the notifier
        pass


def _select_location(lat: float, lng: float) -> None:
    try:
        map_surface.click(Coordinates(lat=lat, lng=lng))
    except ValidationError as exc:
        notifier.warn(str(exc))


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

st.sidebar.title("Workout Log")
st.sidebar.caption(f"Saved to `{DATA_DIR}`")
st.sidebar.metric("Workouts", len(controller.workouts))
if st.sidebar.button("Reset all workouts", type="secondary"):
    _reset()
    st.rerun()

for level, message in notifier.drain():
    if level == "warning":
        st.warning(message)
    else:
        st.info(message)

map_col, list_col = st.columns([3, 2])

# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------

with map_col:
    if map_surface.ready:
        center = map_surface.center
        layers = [
            pdk.Layer(
                "ScatterplotLayer",
                data=map_surface.markers_frame(),
                get_position="[lon, lat]",
                get_fill_color="color",
                get_radius=80,
                pickable=True,
            )
        ]
        if controller.pending_coords is not None:
            pending = controller.pending_coords
            layers.append(
                pdk.Layer(
                    "ScatterplotLayer",
                    data=[{"lat": pending.lat, "lon": pending.lng, "label": "New workout"}],
                    get_position="[lon, lat]",
                    get_fill_color=[66, 133, 244, 220],
                    get_radius=100,
                    pickable=True,
                )
            )
        st.pydeck_chart(
            pdk.Deck(
                layers=layers,
                initial_view_state=pdk.ViewState(
                    latitude=center.lat,
                    longitude=center.lng,
                    zoom=map_surface.zoom,
                ),
                tooltip={
                    "text": "{label}",
                    "style": {
                        "maxWidth": f"{POPUP_MAX_WIDTH}px",
                        "minWidth": f"{POPUP_MIN_WIDTH}px",
                    },
                },
            )
        )

        st.markdown("**Pick a location**")
        lat_col, lng_col, btn_col = st.columns([2, 2, 1])
        lat = lat_col.number_input("Latitude", -90.0, 90.0, value=center.lat, format="%.5f")
        lng = lng_col.number_input("Longitude", -180.0, 180.0, value=center.lng, format="%.5f")
        btn_col.button("Select", on_click=_select_location, args=(lat, lng))
    else:
        st.info("Map unavailable. New workouts cannot be placed without a position.")

# ---------------------------------------------------------------------------
# Form + list
# ---------------------------------------------------------------------------

with list_col:
    if renderer.form_visible and controller.state is SessionState.AWAITING_FORM_INPUT:
        pending = controller.pending_coords
        st.subheader(f"New workout at {pending.lat:.4f}, {pending.lng:.4f}")
        st.selectbox(
            "Type",
            KIND_OPTIONS,
            key=renderer.widget_key("kind"),
            format_func=str.capitalize,
            on_change=controller.on_kind_changed,
        )
        st.text_input("Distance (km)", key=renderer.widget_key("distance"))
        st.text_input("Duration (min)", key=renderer.widget_key("duration"))
        if renderer.show_elevation:
            st.text_input("Elev Gain (m)", key=renderer.widget_key("elevation"))
        else:
            st.text_input("Cadence (step/min)", key=renderer.widget_key("cadence"))
        ok_col, cancel_col = st.columns(2)
        ok_col.button("Add workout", type="primary", on_click=_submit)
        cancel_col.button("Cancel", on_click=controller.on_form_cancelled)
        st.divider()

    for record in renderer.newest_first():
        with st.container(border=True):
            st.markdown(f"**{record.description}**")
            cols = st.columns(4)
            for col, row in zip(cols, format_entry(record)):
                col.metric(row.unit, f"{row.icon} {row.value}")
            st.button(
                "Show on map",
                key=f"goto_{record.id}",
                on_click=controller.on_list_entry_selected,
                args=(record.id,),
                disabled=not map_surface.ready,
            )

    if renderer.entries:
        with st.expander("Summary table"):
            st.dataframe(workouts_frame(controller.workouts), hide_index=True)
