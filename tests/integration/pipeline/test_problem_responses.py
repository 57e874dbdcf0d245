"""End-to-end tests for problem document responses."""

import pytest
from httpx import AsyncClient

from problem_pipeline.core.constants import GENERIC_ERROR_DETAIL


pytestmark = pytest.mark.integration

DIAGNOSTIC_KEYS = {"exception", "stackTrace", "innerException"}


class TestTypedFailures:
    """Typed failures keep their status code and message."""

    async def test_product_not_found(self, client: AsyncClient):
        """GET /api/products/150 should return a 404 problem document."""
        response = await client.get("/api/products/150")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
        data = response.json()
        assert data["status"] == 404
        assert data["title"] == "Resource Not Found"
        assert data["type"] == "https://tools.ietf.org/html/rfc9110#section-15.5.5"
        assert data["detail"] == "Product with id '150' was not found."
        assert data["instance"] == "/api/products/150"

    async def test_user_not_found(self, client: AsyncClient):
        response = await client.get("/api/users/42")

        assert response.status_code == 404
        assert response.json()["detail"] == "User with id '42' was not found."

    async def test_blank_user_id(self, client: AsyncClient):
        response = await client.get("/api/users/%20")

        assert response.status_code == 400
        assert response.json()["errors"] == {"id": ["User ID cannot be empty"]}

    async def test_single_field_validation(self, client: AsyncClient):
        """GET /api/products/0 should report the invalid id field."""
        response = await client.get("/api/products/0")

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Validation Error"
        assert data["type"] == "https://tools.ietf.org/html/rfc9110#section-15.5.1"
        assert data["errors"] == {"id": ["Product ID must be greater than 0"]}

    async def test_multi_field_validation(self, client: AsyncClient):
        """POST /api/products should report every invalid field at once."""
        response = await client.post("/api/products", json={"name": "", "price": 0})

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "One or more validation failures have occurred."
        assert data["errors"] == {
            "name": ["Product name is required"],
            "price": ["Price must be greater than 0"],
        }

    async def test_application_error(self, client: AsyncClient):
        """GET /api/products/error should use the status chosen by the code."""
        response = await client.get("/api/products/error")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == 503
        assert data["title"] == "Application Error"
        assert data["detail"] == "A custom application error occurred"
        assert "errors" not in data


class TestUnclassifiedFailures:
    """Unexpected failures become generic 500 responses."""

    async def test_nested_async_failure_is_caught(self, client: AsyncClient):
        response = await client.get("/api/products/unhandled")

        assert response.status_code == 500
        data = response.json()
        assert data["title"] == "Internal Server Error"
        assert data["detail"] == GENERIC_ERROR_DETAIL
        assert "Pricing rules" not in response.text
        assert not DIAGNOSTIC_KEYS & set(data)

    async def test_diagnostics_keep_generic_detail(
        self, diagnostic_client: AsyncClient
    ):
        response = await diagnostic_client.get("/api/products/unhandled")

        assert response.status_code == 500
        data = response.json()
        assert data["detail"] == GENERIC_ERROR_DETAIL
        assert data["exception"] == "RuntimeError"
        assert "_load_pricing_rules" in data["stackTrace"]


class TestFrameworkFailures:
    """Routing and request validation errors use the same document shape."""

    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
        data = response.json()
        assert data["title"] == "Resource Not Found"
        assert data["instance"] == "/api/nothing-here"

    async def test_method_not_allowed(self, client: AsyncClient):
        response = await client.delete("/api/products/1")

        assert response.status_code == 405
        assert response.json()["title"] == "Application Error"
        assert "GET" in response.headers["allow"]

    async def test_unparseable_path_parameter(self, client: AsyncClient):
        response = await client.get("/api/products/abc")

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Validation Error"
        assert list(data["errors"]) == ["path.product_id"]

    async def test_malformed_body(self, client: AsyncClient):
        response = await client.post(
            "/api/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"]


class TestResponseFormat:
    """Serialization of problem documents."""

    async def test_body_is_indented_camel_case(self, client: AsyncClient):
        response = await client.get("/api/products/150")

        assert response.text.startswith('{\n  "type": ')
        assert '"correlationId": ' in response.text

    async def test_success_is_untouched(self, client: AsyncClient):
        response = await client.get("/api/products/7")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"id": 7, "name": "Product 7", "price": "99.99"}

    async def test_created(self, client: AsyncClient):
        response = await client.post(
            "/api/products", json={"name": "Lamp", "price": "12.50"}
        )

        assert response.status_code == 201
        assert response.json()["name"] == "Lamp"
