"""Unit tests for error rendering (no database behind the app)."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from core import errors


@pytest.mark.unit
class TestApiError:
    def test_kinds_carry_their_status(self):
        assert errors.NotFoundError("x").status_code == 404
        assert errors.BadRequestError("x").status_code == 400
        assert errors.ApiError("x").status_code == 500

    def test_explicit_status_overrides_kind(self):
        err = errors.ApiError("Conflict", 409)
        assert err.status_code == 409
        assert err.message == "Conflict"

    async def test_unexpected_error_is_rendered_generically(self):
        request = MagicMock()
        request.method = "GET"
        request.url.path = "/companies"

        response = await errors.handle_unexpected_error(request, ValueError("secret detail"))

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "error": {"message": "Internal Server Error", "status": 500}
        }


@pytest.mark.unit
class TestErrorResponses:
    async def test_unknown_route_uses_error_shape(self, offline_client):
        response = await offline_client.get("/no-such-thing")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Not Found", "status": 404}}

    async def test_wrong_method_uses_error_shape(self, offline_client):
        response = await offline_client.patch("/companies")

        assert response.status_code == 405
        assert response.json()["error"]["status"] == 405

    async def test_validation_error_names_the_field(self, offline_client):
        response = await offline_client.post("/industries", json={"code": "fin"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"]["status"] == 422
        assert "industry" in body["error"]["message"]

    async def test_api_error_from_service_is_rendered(self, offline_client):
        with patch("companies.repository.get_company", AsyncMock(return_value=None)):
            response = await offline_client.get("/companies/ghost")

        assert response.status_code == 404
        assert response.json() == {
            "error": {"message": "Company with code ghost not found", "status": 404}
        }

    async def test_health(self, offline_client):
        response = await offline_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
