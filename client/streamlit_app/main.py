"""Streamlit client with login and signup forms."""
from __future__ import annotations

import streamlit as st

from api_client import APIClient, APIError, get_client
from forms import check_signup_form
from state import clear_user, init_session_state, set_user


def render_login(client: APIClient) -> None:
    st.header("Login")
    with st.form("login_form"):
        username = st.text_input("Username", key="login_username")
        password = st.text_input("Password", type="password", key="login_password")
        submitted = st.form_submit_button("Login", use_container_width=True)
        if submitted:
            try:
                res = client.login(username, password)
                set_user(res.get("user", {}))
                st.success(res.get("message", "Login successful"))
            except APIError as e:
                st.error(str(e))


def render_signup(client: APIClient) -> None:
    st.header("Sign Up")
    with st.form("signup_form"):
        name = st.text_input("Full Name", key="signup_name")
        username = st.text_input("Username", key="signup_username")
        password = st.text_input("Password", type="password", key="signup_password")
        st.caption("Username: 3-20 characters, letters, numbers and underscores. Password: at least 6 characters.")
        submitted = st.form_submit_button("Sign Up", use_container_width=True)
        if submitted:
            problem = check_signup_form(name, username, password)
            if problem:
                st.error(problem)
                return
            try:
                res = client.signup(name.strip(), username.strip(), password)
                user = res.get("user", {})
                st.success(f"{res.get('message', 'User created successfully')}: {user.get('username')}")
            except APIError as e:
                st.error(str(e))


def main():
    st.set_page_config(page_title="Sample Login", layout="centered")
    init_session_state()
    client = get_client()

    if st.session_state.username:
        st.sidebar.write(f"Signed in as {st.session_state.display_name} (@{st.session_state.username})")
        if st.sidebar.button("Sign out"):
            clear_user()

    page = st.sidebar.radio("Navigation", ["Login", "Sign Up"])

    if page == "Login":
        render_login(client)
    elif page == "Sign Up":
        render_signup(client)


if __name__ == "__main__":
    main()
