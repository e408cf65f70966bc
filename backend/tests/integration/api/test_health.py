"""
Integration tests for service-level endpoints.

WHY: Monitoring and clients rely on these without touching inventory data:
the health check, the root info document, unknown-route handling and the
request ID header.
"""

import pytest
from httpx import AsyncClient


class TestServiceEndpoints:
    """Integration tests for health, root and fallback behavior."""

    @pytest.mark.asyncio
    async def test_health_check(self, client: AsyncClient):
        response = await client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "API is running"
        assert "timestamp" in body

    @pytest.mark.asyncio
    async def test_root_lists_endpoints(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Inventory Management API"
        assert body["endpoints"]["categories"] == "/api/categories"
        assert body["endpoints"]["products"] == "/api/products"

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient):
        """
        Test unknown paths answer with the failure envelope.
        """
        response = await client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Endpoint not found"}

    @pytest.mark.asyncio
    async def test_request_id_header(self, client: AsyncClient):
        response = await client.get("/api/health", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
