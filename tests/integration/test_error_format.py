"""Integration tests for standardized error responses."""

from unittest.mock import patch

import pytest

from modules.products.services import ProductService

pytestmark = pytest.mark.integration

GENERIC_500 = {
    "status": 500,
    "message": "An unexpected error occurred. Please contact the administrator.",
}


class TestStandardizedErrors:
    def test_malformed_json_has_envelope_format(self, api_client):
        response = api_client.post(
            "/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert isinstance(data["message"], str)
        assert data["message"]

    def test_unsupported_media_type_has_envelope_format(self, api_client):
        response = api_client.post(
            "/products",
            data="name=x",
            content_type="application/x-www-form-urlencoded",
        )
        assert response.status_code == 415
        assert response.json()["status"] == 415


class TestUnexpectedErrors:
    def test_list_failure_returns_generic_500(self, api_client):
        with patch.object(
            ProductService, "list_products", side_effect=RuntimeError("db down")
        ):
            response = api_client.get("/products")

        assert response.status_code == 500
        assert response.json() == GENERIC_500

    def test_create_failure_returns_generic_500(self, api_client, product_payload):
        with patch.object(
            ProductService, "create_product", side_effect=RuntimeError("db down")
        ):
            response = api_client.post("/products", product_payload, format="json")

        assert response.status_code == 500
        assert response.json() == GENERIC_500

    def test_delete_failure_returns_generic_500(self, api_client, sample_product):
        with patch.object(
            ProductService, "delete_product", side_effect=RuntimeError("db down")
        ):
            response = api_client.delete(
                f"/products/{sample_product.id}",
                {"password": "widget-pass"},
                format="json",
            )

        assert response.status_code == 500
        assert response.json() == GENERIC_500
