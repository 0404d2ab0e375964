"""
End-to-end page flows through FastAPI's TestClient.
"""
from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the roster package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.app import create_app  # noqa: E402
from roster.core.config import Settings  # noqa: E402
from roster.core.csrf import CSRF_COOKIE_NAME  # noqa: E402

ANN = {"name": "Ann Lee", "identifier": "1", "email": "a@b.com", "contact": "1234567890"}


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        app_env="dev",
        data_file=str(tmp_path / "data.json"),
        database_url="",
        storage_key="students",
        notice_duration_ms=60000,
        notice_fade_ms=300,
    )


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        test_client.get("/")
        yield test_client


def _post(client: TestClient, url: str, data: dict | None = None):
    payload = dict(data or {})
    payload["csrf_token"] = client.cookies.get(CSRF_COOKIE_NAME)
    return client.post(url, data=payload)


def _roster(client: TestClient) -> dict:
    return client.get("/students").json()


def test_empty_page_shows_placeholder(client):
    page = client.get("/")
    assert page.status_code == 200
    assert "No students registered yet." in page.text
    assert "data-action=" not in page.text
    assert "Add Student" in page.text
    assert page.headers["X-Frame-Options"] == "DENY"
    assert page.cookies.get(CSRF_COOKIE_NAME) or client.cookies.get(CSRF_COOKIE_NAME)


def test_add_edit_update_and_duplicate_scenario(client):
    page = _post(client, "/students", ANN)
    assert page.status_code == 200
    assert page.text.count('data-action="edit"') == 1
    assert page.text.count('data-action="delete"') == 1
    assert "Student added successfully." in page.text
    assert _roster(client)["students"] == [
        {"name": "Ann Lee", "id": "1", "email": "a@b.com", "contact": "1234567890"}
    ]

    page = _post(client, "/students/actions", {"action": "edit:0"})
    assert "Update Student" in page.text
    assert 'value="Ann Lee"' in page.text
    assert _roster(client)["mode"] == "edit"

    page = _post(client, "/students", {**ANN, "identifier": "2"})
    assert "Student updated successfully." in page.text
    state = _roster(client)
    assert state["mode"] == "add"
    assert state["edit_index"] is None
    assert state["students"][0]["id"] == "2"

    _post(client, "/students", {**ANN, "name": "Bo Chan"})
    page = _post(client, "/students", {**ANN, "identifier": "1", "name": "Cy Park"})
    assert "A student with this Student ID already exists." in page.text
    assert [s["id"] for s in _roster(client)["students"]] == ["2", "1"]


def test_validation_message_keeps_submitted_values(client):
    page = _post(client, "/students", {**ANN, "contact": "123"})
    assert "Contact number must be digits only and at least 10 digits." in page.text
    assert 'value="123"' in page.text
    assert _roster(client)["students"] == []


def test_delete_asks_for_confirmation(client):
    _post(client, "/students", ANN)

    page = _post(client, "/students/actions", {"action": "delete:0"})
    assert "Are you sure you want to delete this student?" in page.text
    assert len(_roster(client)["students"]) == 1

    _post(client, "/students/actions", {"action": "delete:0", "confirm": "no"})
    assert len(_roster(client)["students"]) == 1

    page = _post(client, "/students/actions", {"action": "delete:0", "confirm": "yes"})
    assert "Student deleted" in page.text
    assert "No students registered yet." in page.text
    assert _roster(client)["students"] == []


def test_bad_actions_are_ignored(client):
    _post(client, "/students", ANN)
    for action in ("delete:7", "edit:9", "nonsense"):
        assert _post(client, "/students/actions", {"action": action}).status_code == 200
    state = _roster(client)
    assert len(state["students"]) == 1
    assert state["mode"] == "add"


def test_reset_leaves_edit_mode(client):
    _post(client, "/students", ANN)
    _post(client, "/students/actions", {"action": "edit:0"})
    page = _post(client, "/students/reset")
    assert "Add Student" in page.text
    assert _roster(client)["mode"] == "add"


def test_posts_without_csrf_token_are_rejected(client):
    response = client.post("/students", data=ANN)
    assert response.status_code == 403
    assert _roster(client)["students"] == []


def test_roster_survives_restart(settings, client):
    _post(client, "/students", ANN)
    with TestClient(create_app(settings)) as fresh:
        assert fresh.get("/students").json()["students"][0]["name"] == "Ann Lee"


def test_layout_endpoint(client):
    assert client.get("/layout", params={"viewport": 1000}).json() == {"max_height": 420}
    assert client.get("/layout", params={"viewport": 1000, "header": 100, "form": 200}).json() == {"max_height": 560}
    assert client.get("/layout", params={"viewport": -1}).status_code == 422


def test_valid_token_from_foreign_origin_is_rejected(client):
    token = client.cookies.get(CSRF_COOKIE_NAME)
    response = client.post(
        "/students",
        data={**ANN, "csrf_token": token},
        headers={"origin": "http://elsewhere.example"},
    )
    assert response.status_code == 403
    assert _roster(client)["students"] == []

    same_origin = client.post(
        "/students",
        data={**ANN, "csrf_token": token},
        headers={"origin": "http://testserver"},
    )
    assert same_origin.status_code == 200
    assert len(_roster(client)["students"]) == 1


def test_zero_display_time_reaches_the_page(settings):
    instant = replace(settings, notice_duration_ms=0, notice_fade_ms=300)
    with TestClient(create_app(instant)) as fresh:
        fresh.get("/")
        page = _post(fresh, "/students", ANN)
        assert 'data-display-ms="0"' in page.text
        script = fresh.get("/static/roster.js").text
        assert "isNaN(display)" in script
        assert "|| 1800" not in script


def test_hsts_only_in_prod(settings):
    with TestClient(create_app(replace(settings, app_env="prod"))) as prod:
        response = prod.get("/layout", params={"viewport": 800})
        assert response.headers["Strict-Transport-Security"].startswith("max-age=")
        assert response.headers["Content-Security-Policy"].startswith("default-src 'self'")
    with TestClient(create_app(settings)) as dev:
        assert "Strict-Transport-Security" not in dev.get("/layout", params={"viewport": 800}).headers
