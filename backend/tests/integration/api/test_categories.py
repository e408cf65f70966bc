"""
Integration tests for category management API.

WHY: Categories are the parent of every product. These tests ensure:
1. Every response uses the {success, data|error|message} envelope
2. Each failure kind maps to its HTTP status
3. Categories with products cannot be deleted
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import CategoryFactory, ProductFactory


class TestCategoryEndpoints:
    """Integration tests for category CRUD endpoints."""

    @pytest.mark.asyncio
    async def test_create_category(self, client: AsyncClient):
        """
        Test creating a category returns 201 with the stored row.
        """
        response = await client.post("/api/categories", json={"name": "Electronics"})

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["id"] > 0
        assert body["data"]["name"] == "Electronics"
        assert "created_at" in body["data"]
        assert "updated_at" in body["data"]

    @pytest.mark.asyncio
    async def test_list_categories_sorted(self, client: AsyncClient, db_session: AsyncSession):
        for name in ("Electronics", "Books", "Clothing"):
            await CategoryFactory.create(db_session, name=name)

        response = await client.get("/api/categories")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [c["name"] for c in body["data"]] == ["Books", "Clothing", "Electronics"]

    @pytest.mark.asyncio
    async def test_list_categories_empty(self, client: AsyncClient):
        response = await client.get("/api/categories")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_get_category(self, client: AsyncClient, test_category):
        response = await client.get(f"/api/categories/{test_category.id}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Electronics"

    @pytest.mark.asyncio
    async def test_get_missing_category(self, client: AsyncClient):
        response = await client.get("/api/categories/999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Category not found"}

    @pytest.mark.asyncio
    async def test_duplicate_name_conflict(self, client: AsyncClient, test_category):
        """
        Test creating a second category with the same name.

        WHY: 409 tells the UI the name is taken, not that the input is malformed.
        """
        response = await client.post("/api/categories", json={"name": "Electronics"})

        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "Category name already exists"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{"name": ""}, {"name": "A"}, {}])
    async def test_invalid_name_bad_request(self, client: AsyncClient, payload):
        response = await client.post("/api/categories", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "name" in body["error"]

    @pytest.mark.asyncio
    async def test_update_category(self, client: AsyncClient, test_category):
        response = await client.put(
            f"/api/categories/{test_category.id}", json={"name": "Gadgets"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Gadgets"

        response = await client.get(f"/api/categories/{test_category.id}")
        assert response.json()["data"]["name"] == "Gadgets"

    @pytest.mark.asyncio
    async def test_update_to_taken_name(
        self, client: AsyncClient, db_session: AsyncSession, test_category
    ):
        await CategoryFactory.create(db_session, name="Books")

        response = await client.put(
            f"/api/categories/{test_category.id}", json={"name": "Books"}
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_missing_category(self, client: AsyncClient):
        response = await client.put("/api/categories/999", json={"name": "Ghost"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_missing_category_with_invalid_name(self, client: AsyncClient):
        """
        Test a missing category is reported before the new name is validated.
        """
        response = await client.put("/api/categories/999", json={"name": "A"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Category not found"}

    @pytest.mark.asyncio
    async def test_delete_category(self, client: AsyncClient, test_category):
        response = await client.delete(f"/api/categories/{test_category.id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Category deleted successfully"}

        response = await client.get(f"/api/categories/{test_category.id}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_category_in_use(
        self, client: AsyncClient, db_session: AsyncSession, test_category
    ):
        """
        Test deleting a category that still has products.

        WHY: Products must never be left pointing at a missing category.
        """
        await ProductFactory.create(db_session, test_category, name="Laptop")

        response = await client.delete(f"/api/categories/{test_category.id}")

        assert response.status_code == 409
        assert response.json()["success"] is False

        response = await client.get(f"/api/categories/{test_category.id}")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_non_integer_id_bad_request(self, client: AsyncClient):
        response = await client.get("/api/categories/abc")

        assert response.status_code == 400
        assert response.json()["success"] is False
