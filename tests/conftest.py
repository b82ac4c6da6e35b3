"""Shared fixtures: an app wired to a private in-memory SQLite database."""
import os

# app.main builds a module-level app on import; keep it off MySQL.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture()
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", CORS_ALLOWED_ORIGINS=[ALLOWED_ORIGIN])


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
