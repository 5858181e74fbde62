"""Weather App — current conditions for the selected location."""

from __future__ import annotations

import streamlit as st

from weatherapi import Settings

from shared import (
    ACCENT_COLOR,
    CATEGORY_VISUALS,
    LOCATION_PAGE,
    ROUTE_KEY,
    SCREEN_KEY,
    ScreenStatus,
    WeatherScreenController,
    WeatherService,
    format_humidity,
    format_pressure,
    format_temperature,
    format_wind,
)

st.set_page_config(page_title="Weather", page_icon="\U0001f324️", layout="centered")


def _go_back() -> None:
    st.session_state.pop(SCREEN_KEY, None)
    st.session_state.pop(ROUTE_KEY, None)
    st.switch_page(LOCATION_PAGE)


# ── Screen state ─────────────────────────────────────────────────────────────

# One controller per visit; dropped again on "Go Back".
screen: WeatherScreenController | None = st.session_state.get(SCREEN_KEY)
if screen is None:
    screen = WeatherScreenController(
        st.session_state.get(ROUTE_KEY),
        WeatherService(Settings.load()),
    )
    st.session_state[SCREEN_KEY] = screen
    with st.spinner("Loading weather..."):
        screen.load()

if screen.status is ScreenStatus.ERROR:
    st.error(screen.error)
    if st.button("Go Back", type="primary", use_container_width=True):
        _go_back()
    st.stop()

if screen.status is ScreenStatus.EMPTY or screen.snapshot is None:
    st.error(screen.empty_message)
    if st.button("Go Back", type="primary", use_container_width=True):
        _go_back()
    st.stop()


# ── Conditions ───────────────────────────────────────────────────────────────

snapshot = screen.snapshot

st.subheader(snapshot.place)
st.markdown(
    f'<div style="height:2px;background:{ACCENT_COLOR};border-radius:1px;'
    f'margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)
st.markdown(f"# {format_temperature(snapshot.temperature_c)}")
st.markdown(f"### {snapshot.condition_text}")
if screen.category is not None:
    st.markdown(
        f'<div style="font-size:8rem;text-align:center">{CATEGORY_VISUALS[screen.category]}</div>',
        unsafe_allow_html=True,
    )

col1, col2 = st.columns(2)
col1.metric("Feels Like", format_temperature(snapshot.feels_like_c))
col2.metric("Humidity", format_humidity(snapshot.humidity_pct))
col3, col4 = st.columns(2)
col3.metric("Wind", format_wind(snapshot.wind_kph))
col4.metric("Pressure", format_pressure(snapshot.pressure_mb))


# ── Actions ──────────────────────────────────────────────────────────────────

st.button("Refresh", type="primary", use_container_width=True, on_click=screen.refresh)
if st.button("Search Another Location", use_container_width=True):
    _go_back()
