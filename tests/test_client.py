"""Streamlit client helper tests: API wrapper and form pre-checks."""
from unittest import mock

import pytest
import requests

from api_client import APIClient, APIError
from forms import check_signup_form


def _response(status_code: int, body: str) -> requests.Response:
    res = requests.Response()
    res.status_code = status_code
    res.reason = "OK" if status_code < 400 else "Error"
    res._content = body.encode("utf-8")
    return res


def test_login_posts_credentials() -> None:
    client = APIClient(base_url="http://backend:8000/")
    ok = _response(200, '{"message": "Login successful", "user": {"name": "Ann Lee", "username": "annlee"}}')
    with mock.patch("api_client.requests.post", return_value=ok) as post:
        res = client.login("annlee", "secret1")
    assert res["user"]["username"] == "annlee"
    url = post.call_args.args[0]
    assert url == "http://backend:8000/api/login"
    assert post.call_args.kwargs["json"] == {"username": "annlee", "password": "secret1"}


def test_signup_surfaces_backend_error() -> None:
    client = APIClient(base_url="http://backend:8000")
    conflict = _response(409, '{"error": "Username already exists"}')
    with mock.patch("api_client.requests.post", return_value=conflict):
        with pytest.raises(APIError) as excinfo:
            client.signup("Ann Lee", "annlee", "secret1")
    assert str(excinfo.value) == "Username already exists"
    assert excinfo.value.status_code == 409


def test_network_failure_is_server_error() -> None:
    client = APIClient(base_url="http://backend:8000")
    with mock.patch("api_client.requests.get", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(APIError) as excinfo:
            client.health()
    assert str(excinfo.value) == "Server error"


def test_non_json_error_is_server_error() -> None:
    client = APIClient(base_url="http://backend:8000")
    with mock.patch("api_client.requests.post", return_value=_response(502, "<html>bad gateway</html>")):
        with pytest.raises(APIError) as excinfo:
            client.login("annlee", "secret1")
    assert str(excinfo.value) == "Server error"
    assert excinfo.value.status_code == 502


def test_check_signup_form() -> None:
    assert check_signup_form("Ann Lee", "annlee", "secret1") is None
    assert check_signup_form("  ", "annlee", "secret1") == "Name is required"
    assert check_signup_form("Ann", "", "secret1") == "Username is required"
    assert check_signup_form("Ann", "an", "secret1") == "Username must be at least 3 characters long"
    assert check_signup_form("Ann", "annlee", "") == "Password is required"
    assert check_signup_form("Ann", "annlee", "12345") == "Password must be at least 6 characters long"
