"""Client-side checks run before the signup form is submitted."""
from __future__ import annotations

from typing import Optional


def check_signup_form(name: str, username: str, password: str) -> Optional[str]:
    """Return the first problem with the form, or None when it may be sent.

    The backend validates again; this only saves a round trip for the
    obvious cases.
    """
    if not name.strip():
        return "Name is required"
    if not username.strip():
        return "Username is required"
    if len(username) < 3:
        return "Username must be at least 3 characters long"
    if not password:
        return "Password is required"
    if len(password) < 6:
        return "Password must be at least 6 characters long"
    return None
