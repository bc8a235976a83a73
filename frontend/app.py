#file: frontend/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import streamlit as st

st.set_page_config(page_title="Qualité de l'air - Lyon", page_icon="🌍", layout="centered")

from frontend.data_fetch import DEFAULT_CODE_INSEE, load_dashboard_state
from frontend.state import Loading
from frontend.ui_elements import display_state


def request_refresh() :
    """Put the dashboard back in the loading state, the rerun fetches again."""
    st.session_state["air_quality_state"] = Loading()


# Streamlit UI
st.title("Qualité de l'air - Lyon")

# First visit starts in the loading state
state = st.session_state.setdefault("air_quality_state", Loading())

content = st.empty()
refresh_slot = st.empty()

if isinstance(state, Loading) :
    with content.container() :
        display_state(state)
    refresh_slot.button("Chargement...", disabled = True, key = "refresh_pending")

    state = asyncio.run(load_dashboard_state(DEFAULT_CODE_INSEE))
    st.session_state["air_quality_state"] = state

with content.container() :
    display_state(state)
refresh_slot.button("Actualiser", on_click = request_refresh, key = "refresh")
