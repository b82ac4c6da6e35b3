"""Pydantic schemas for authentication flows.

Request bodies are accepted as untyped JSON and checked by
``app.core.validation``; the models below only shape responses.
"""
from __future__ import annotations

from pydantic import BaseModel


class UserOut(BaseModel):
    """Public projection of a user record. Never carries the password."""

    name: str
    username: str


class AuthResponse(BaseModel):
    message: str
    user: UserOut
