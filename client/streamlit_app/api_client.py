"""HTTP client for FastAPI backend."""
from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from config import BACKEND_BASE_URL, REQUEST_TIMEOUT

LOGGER = logging.getLogger(__name__)

SERVER_ERROR = "Server error"


class APIError(Exception):
    """Raised when the backend rejects a request; ``str(exc)`` is safe to show users."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class APIClient:
    def __init__(self, base_url: str = BACKEND_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    # -------------------- Auth --------------------
    def signup(self, name: str, username: str, password: str) -> Dict[str, Any]:
        payload = {"name": name, "username": username, "password": password}
        return self._post("/api/signup", json=payload)

    def login(self, username: str, password: str) -> Dict[str, Any]:
        payload = {"username": username, "password": password}
        return self._post("/api/login", json=payload)

    # -------------------- Health --------------------
    def health(self) -> Dict[str, Any]:
        return self._get("/api/health")

    # -------------------- Internal helpers --------------------
    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _post(self, path: str, json: Dict[str, Any] | None = None) -> Dict[str, Any]:
        try:
            res = requests.post(
                f"{self.base_url}{path}", json=json or {}, headers=self._headers(), timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as exc:
            LOGGER.error("POST %s failed: %s", path, exc)
            raise APIError(SERVER_ERROR) from exc
        return self._unwrap("POST", path, res)

    def _get(self, path: str) -> Dict[str, Any]:
        try:
            res = requests.get(f"{self.base_url}{path}", headers=self._headers(), timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            LOGGER.error("GET %s failed: %s", path, exc)
            raise APIError(SERVER_ERROR) from exc
        return self._unwrap("GET", path, res)

    def _unwrap(self, method: str, path: str, res: requests.Response) -> Dict[str, Any]:
        try:
            body = res.json() if res.text else {}
        except ValueError:
            body = {}
        if res.ok:
            return body
        LOGGER.warning("%s %s -> %s %s; body=%s", method, path, res.status_code, res.reason, res.text)
        message = body.get("error") if isinstance(body, dict) else None
        raise APIError(message or SERVER_ERROR, status_code=res.status_code)


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
