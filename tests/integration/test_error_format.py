"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_domain_error_has_standard_format(self, api_client):
        response = api_client.get("/api/customers/12345/")
        assert response.status_code == 400
        data = response.json()
        assert set(data) == {"title", "timestamp", "status", "exception", "details"}
        assert isinstance(data["details"], dict)

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/customers/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["exception"] == "ParseError"
        assert "message" in data["details"]

    def test_method_not_allowed_keeps_status(self, api_client):
        response = api_client.delete("/api/credits/")
        assert response.status_code == 405
        assert response.json()["status"] == 405
