"""Configuration for the Streamlit login client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:8000")
REQUEST_TIMEOUT = int(os.getenv("BACKEND_TIMEOUT", "30"))
