"""End-to-end tests for health and fallback routes."""

from fastapi.testclient import TestClient


class TestHealthAPI:
    """GET /health and unknown routes."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["status"] == "healthy"
        assert "gitSha" in body

    def test_unknown_route_is_json_404(self, client: TestClient):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["message"]
