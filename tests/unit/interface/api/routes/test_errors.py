"""Tests for the JSON error body on unexpected failures."""

from fastapi.testclient import TestClient

from tour.interface.api.app import create_app
from tests.di import build_test_container


def test_uncaught_error_returns_json_500():
    app = create_app(build_test_container())

    @app.get("/explode")
    async def explode():
        raise RuntimeError("database connection reset")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    }
