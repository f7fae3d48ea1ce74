# tests/test_routes/test_errors.py
from tonewise.infrastructure.di_container import get_analysis_service


class TestErrorHandlers:

    def test_unknown_route(self, app_client):
        response = app_client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_wrong_method_is_not_found(self, app_client):
        response = app_client.get("/api/analyze")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_malformed_json(self, app_client):
        response = app_client.post(
            "/api/analyze",
            content=b'{"message": ',
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be a JSON object"}

    def test_non_object_body(self, app_client):
        response = app_client.post("/api/compare", json=["hi", "there"])

        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be a JSON object"}

    def test_unhandled_exception(self, app_client):
        def broken_service():
            raise RuntimeError("container exploded")

        app_client.app.dependency_overrides[get_analysis_service] = broken_service

        response = app_client.post("/api/analyze", json={"message": "hello"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "exploded" not in response.text

    def test_unhandled_exception_keeps_cors_and_security_headers(self, app_client):
        def broken_service():
            raise RuntimeError("container exploded")

        app_client.app.dependency_overrides[get_analysis_service] = broken_service

        allowed = app_client.post("/api/analyze", json={"message": "hello"},
                                  headers={"Origin": "http://localhost:3000"})
        foreign = app_client.post("/api/analyze", json={"message": "hello"},
                                  headers={"Origin": "https://evil.example"})

        assert allowed.status_code == 500
        assert allowed.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert allowed.headers["access-control-allow-credentials"] == "true"
        assert allowed.headers["x-content-type-options"] == "nosniff"
        assert foreign.status_code == 500
        assert "access-control-allow-origin" not in foreign.headers
        assert foreign.headers["x-frame-options"] == "SAMEORIGIN"
