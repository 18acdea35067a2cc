"""Integration tests for the error envelope on framework-level failures."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_malformed_json_has_error_envelope(self, api_client):
        response = api_client.post(
            "/api/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == "error"
        assert data["title"] == "Request error"
        assert data["message"]

    def test_unsupported_media_type_has_error_envelope(self, api_client):
        response = api_client.post(
            "/api/products", data="code=ABC", content_type="text/plain"
        )
        assert response.status_code == 415
        assert response.json()["status"] == "error"

    def test_method_not_allowed_has_error_envelope(self, api_client, make_product):
        product = make_product()
        response = api_client.patch(
            f"/api/products/{product.id}", {"name": "Nope"}, format="json"
        )
        assert response.status_code == 405
        data = response.json()
        assert data["status"] == "error"
        assert "Allow" in response

    def test_unexpected_failure_returns_500_envelope(self, api_client, monkeypatch):
        from modules.products.repositories.django_repository import (
            ProductDjangoRepository,
        )

        def _boom(self):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(ProductDjangoRepository, "list_active", _boom)

        response = api_client.get("/api/products")

        assert response.status_code == 500
        data = response.json()
        assert data == {
            "title": "Internal server error",
            "message": "database exploded",
            "status": "error",
        }
