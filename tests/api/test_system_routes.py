"""API tests for system routes, framework errors and CORS."""

import pytest

ORIGIN = "https://app.example.com"


@pytest.mark.api
class TestSystemRoutes:
    """Test root, health and fallback errors."""

    def test_root_points_at_extract(self, client):
        response = client.get("/")

        assert response.status_code == 405
        assert response.text == "Use POST /api/extract"
        assert response.headers["allow"] == "POST"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"error": "not_found"}

    def test_wrong_method(self, client):
        response = client.get("/api/extract")

        assert response.status_code == 405
        assert response.json() == {"error": "method_not_allowed"}

    def test_trace_id_header(self, client):
        response = client.get("/health")

        assert response.headers.get("x-trace-id")


@pytest.mark.api
class TestCors:
    """Test cross-origin headers for the configured origin."""

    def test_preflight_allowed_origin(self, client):
        response = client.options(
            "/api/extract",
            headers={
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == ORIGIN
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "POST" in response.headers["access-control-allow-methods"]
        assert response.headers["access-control-max-age"] == "86400"

    def test_preflight_other_origin_refused(self, client):
        response = client.options(
            "/api/extract",
            headers={
                "Origin": "https://evil.example.com",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 400
        assert "access-control-allow-origin" not in response.headers

    def test_simple_request_echoes_origin(self, client):
        response = client.post("/api/logout", headers={"Origin": ORIGIN})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == ORIGIN
        assert "Origin" in response.headers["vary"]
