"""Weather App — location form screen (Streamlit + WeatherAPI.com)."""

from __future__ import annotations

import streamlit as st

from weatherapi import Settings

from shared import (
    APP_TITLE,
    ROUTE_KEY,
    SCREEN_KEY,
    WEATHER_PAGE,
    LocationFormController,
    WeatherService,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(page_title=APP_TITLE, page_icon="\U0001f324️", layout="centered")

st.title(APP_TITLE)

form = LocationFormController(WeatherService(Settings.load()))


# ── Form ─────────────────────────────────────────────────────────────────────

with st.form("location"):
    form.country = st.text_input("Country")
    form.state = st.text_input("State/Region")
    submitted = st.form_submit_button("Get Weather", type="primary", use_container_width=True)

if submitted:
    with st.spinner("Finding location..."):
        route = form.submit()
    if route is not None:
        st.session_state[ROUTE_KEY] = route
        st.session_state.pop(SCREEN_KEY, None)
        st.switch_page(WEATHER_PAGE)

if form.error:
    st.error(form.error)

if st.button("Use My Current Location", use_container_width=True):
    st.session_state[ROUTE_KEY] = form.use_current_location()
    st.session_state.pop(SCREEN_KEY, None)
    st.switch_page(WEATHER_PAGE)
