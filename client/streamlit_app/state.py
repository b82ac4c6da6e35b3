"""Session state helpers for Streamlit."""
from __future__ import annotations

import streamlit as st


def init_session_state() -> None:
    defaults = {
        "username": None,
        "display_name": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def set_user(user: dict) -> None:
    st.session_state.username = user.get("username")
    st.session_state.display_name = user.get("name")


def clear_user() -> None:
    st.session_state.username = None
    st.session_state.display_name = None
