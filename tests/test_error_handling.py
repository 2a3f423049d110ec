"""
Error handling and middleware tests.

- Malformed JSON is reported as a 400 validation error
- Missing aggregates surface as 500 INTERNAL_ERROR
- Store failures surface as a generic 500 without leaking details
- Every response carries X-Request-ID / X-Process-Time
"""

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from repositories import MealRepository
from test_fixtures import sign_up_and_login


def test_malformed_json_is_bad_request(client):
    response = client.post(
        "/users",
        content=b'{"name": "Sarah", ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"


def test_missing_body_is_bad_request(client):
    assert client.post("/users").status_code == 400


def test_metrics_failure_returns_500(client, monkeypatch):
    sign_up_and_login(client)
    monkeypatch.setattr(MealRepository, "count_in_diet_for_user", lambda self, user_id: None)

    response = client.get("/meals/metrics")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "metrics" not in response.json()


def test_store_failure_returns_generic_500(api_app, monkeypatch):
    def broken(self, user_id):
        raise OperationalError("SELECT ...", {}, Exception("database is locked"))

    monkeypatch.setattr(MealRepository, "list_for_user", broken)

    with TestClient(api_app, raise_server_exceptions=False) as client:
        sign_up_and_login(client)
        response = client.get("/meals")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "INTERNAL_SERVER_ERROR"
    assert "locked" not in error["message"]


def test_request_id_headers(client):
    response = client.get("/health-check")
    assert response.headers["X-Request-ID"]
    assert float(response.headers["X-Process-Time"]) >= 0


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"
