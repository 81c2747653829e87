"""Tests for CSRF, authentication and rate limit guards on the HTTP API."""

from uuid import uuid4

TOUR = {"title": "Alps Hiking Week", "start_date": "2026-07-01", "end_date": "2026-07-08"}


class TestCSRF:
    def test_state_change_without_token_is_forbidden(self, client):
        response = client.post("/api/tours", json=TOUR)

        assert response.status_code == 403
        assert response.json() == {
            "error": {"code": "FORBIDDEN", "message": "Invalid CSRF token"}
        }

    def test_mismatched_header_is_forbidden(self, client, csrf_headers, settings):
        response = client.post(
            "/api/tours", json=TOUR, headers={settings.csrf.header_name: "f" * 64}
        )

        assert response.status_code == 403

    def test_auth_flow_is_exempt(self, client):
        response = client.post("/api/auth/verify-invitation", json={"otp": "0" * 64})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_signout_is_not_exempt(self, client):
        response = client.post("/api/auth/signout")

        assert response.status_code == 403


class TestAuthentication:
    def test_missing_session_is_unauthorized(self, client, csrf_headers):
        response = client.post("/api/tours", json=TOUR, headers=csrf_headers)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_invalid_session_is_unauthorized(self, client, settings):
        client.cookies.set(settings.auth.cookie_name, "not-a-jwt")

        response = client.get("/api/invitations/pending")

        assert response.status_code == 401

    def test_valid_session_reaches_use_case(self, client, session_cookie):
        response = client.get("/api/invitations/pending")

        # The signed-in account was never stored
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestRateLimit:
    def test_invitation_actions_are_limited(self, client, session_cookie, csrf_headers):
        path = f"/api/invitations/{uuid4()}/accept"

        for _ in range(10):
            response = client.post(path, headers=csrf_headers)
            assert response.status_code == 404

        response = client.post(path, headers=csrf_headers)

        assert response.status_code == 429
        assert response.json()["error"]["code"] == "TOO_MANY_REQUESTS"
        assert response.headers["X-RateLimit-Limit"] == "10"
        assert response.headers["X-RateLimit-Remaining"] == "0"
        assert 1 <= int(response.headers["Retry-After"]) <= 60
        assert "X-RateLimit-Reset" in response.headers

    def test_rejected_forgeries_do_not_consume_quota(
        self, client, session_cookie, csrf_headers
    ):
        path = f"/api/invitations/{uuid4()}/decline"
        for _ in range(20):
            assert client.post(path).status_code == 403

        response = client.post(path, headers=csrf_headers)

        assert response.status_code == 404


class TestErrorBodies:
    def test_unknown_invitation_token(self, client):
        response = client.get("/api/invitations/by-token/" + "f" * 32)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_validation_error_body(self, client):
        response = client.post("/api/auth/verify-invitation", json={})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["loc"] == ["body", "otp"]

    def test_malformed_invitation_id(self, client, session_cookie, csrf_headers):
        response = client.post("/api/invitations/not-a-uuid/accept", headers=csrf_headers)

        assert response.status_code == 422
