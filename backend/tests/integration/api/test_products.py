"""
Integration tests for product management API.

WHY: Products reference categories. These tests ensure:
1. A missing category is a 400 on writes but a 404 on the category listing
2. Prices are rendered as two-decimal strings
3. Partial updates keep omitted fields
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import CategoryFactory, ProductFactory


class TestProductEndpoints:
    """Integration tests for product CRUD endpoints."""

    @pytest.mark.asyncio
    async def test_create_product(self, client: AsyncClient, sample_product_data, test_category):
        """
        Test creating a product returns it with its category view.
        """
        response = await client.post("/api/products", json=sample_product_data)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["name"] == "Laptop"
        assert data["description"] == "Gaming laptop"
        assert data["price"] == "1000.00"
        assert data["stock"] == 10
        assert data["category_id"] == test_category.id
        assert data["category"] == {"id": test_category.id, "name": "Electronics"}

    @pytest.mark.asyncio
    async def test_create_with_missing_category(self, client: AsyncClient, sample_product_data):
        """
        Test a product write that references a missing category.

        WHY: The category ID came from the request body, so this is a bad
        request rather than a missing resource.
        """
        sample_product_data["category_id"] = 999

        response = await client.post("/api/products", json=sample_product_data)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Category not found"}

        response = await client.get("/api/products")
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_create_with_negative_price(self, client: AsyncClient, sample_product_data):
        sample_product_data["price"] = -100

        response = await client.post("/api/products", json=sample_product_data)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "price" in body["error"]

    @pytest.mark.asyncio
    async def test_list_products(self, client: AsyncClient, db_session: AsyncSession, test_category):
        await ProductFactory.create(db_session, test_category, name="Phone", price="499.5")
        await ProductFactory.create(db_session, test_category, name="Laptop", price=1000)

        response = await client.get("/api/products")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [p["name"] for p in data] == ["Laptop", "Phone"]
        assert [p["price"] for p in data] == ["1000.00", "499.50"]

    @pytest.mark.asyncio
    async def test_get_product(self, client: AsyncClient, db_session: AsyncSession, test_category):
        product = await ProductFactory.create(db_session, test_category, name="Laptop")

        response = await client.get(f"/api/products/{product.id}")

        assert response.status_code == 200
        assert response.json()["data"]["category"]["name"] == "Electronics"

    @pytest.mark.asyncio
    async def test_get_missing_product(self, client: AsyncClient):
        response = await client.get("/api/products/999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Product not found"}

    @pytest.mark.asyncio
    async def test_list_by_category(self, client: AsyncClient, db_session: AsyncSession, test_category):
        books = await CategoryFactory.create(db_session, name="Books")
        await ProductFactory.create(db_session, test_category, name="Laptop")
        await ProductFactory.create(db_session, books, name="Dune")

        response = await client.get(f"/api/products/category/{books.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [p["name"] for p in data] == ["Dune"]
        assert data[0]["category"]["name"] == "Books"

    @pytest.mark.asyncio
    async def test_list_by_category_empty(self, client: AsyncClient, test_category):
        response = await client.get(f"/api/products/category/{test_category.id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_list_by_missing_category(self, client: AsyncClient):
        response = await client.get("/api/products/category/999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Category not found"}

    @pytest.mark.asyncio
    async def test_partial_update(self, client: AsyncClient, sample_product_data):
        """
        Test updating only the price leaves every other field unchanged.
        """
        created = (await client.post("/api/products", json=sample_product_data)).json()["data"]

        response = await client.put(f"/api/products/{created['id']}", json={"price": 900})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == "900.00"
        for field in ("name", "description", "stock", "category_id", "category"):
            assert data[field] == created[field]

    @pytest.mark.asyncio
    async def test_update_to_missing_category(self, client: AsyncClient, sample_product_data):
        created = (await client.post("/api/products", json=sample_product_data)).json()["data"]

        response = await client.put(f"/api/products/{created['id']}", json={"category_id": 999})

        assert response.status_code == 400
        assert response.json()["error"] == "Category not found"

    @pytest.mark.asyncio
    async def test_update_null_name_rejected(self, client: AsyncClient, sample_product_data):
        created = (await client.post("/api/products", json=sample_product_data)).json()["data"]

        response = await client.put(f"/api/products/{created['id']}", json={"name": None})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_missing_product(self, client: AsyncClient):
        response = await client.put("/api/products/999", json={"price": 1})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_product(self, client: AsyncClient, sample_product_data):
        created = (await client.post("/api/products", json=sample_product_data)).json()["data"]

        response = await client.delete(f"/api/products/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Product deleted successfully"}

        response = await client.get(f"/api/products/{created['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_product(self, client: AsyncClient):
        response = await client.delete("/api/products/999")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_missing_product_with_invalid_body(self, client: AsyncClient):
        """
        Test a missing product is reported before the body is validated.

        WHY: The addressed product is looked up first, so the caller learns
        the product is gone rather than that the price is wrong.
        """
        response = await client.put("/api/products/999", json={"price": -1})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Product not found"}

    @pytest.mark.asyncio
    async def test_create_missing_category_reported_before_fields(
        self, client: AsyncClient, sample_product_data
    ):
        sample_product_data.update(category_id=999, price=-1)

        response = await client.post("/api/products", json=sample_product_data)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Category not found"}

    @pytest.mark.asyncio
    async def test_price_rounded_to_cents(self, client: AsyncClient, sample_product_data):
        sample_product_data["price"] = "19.999"

        response = await client.post("/api/products", json=sample_product_data)

        assert response.status_code == 201
        assert response.json()["data"]["price"] == "20.00"

    @pytest.mark.asyncio
    async def test_non_object_body_rejected(self, client: AsyncClient):
        response = await client.post("/api/products", json=["Laptop"])

        assert response.status_code == 400
        assert response.json()["success"] is False
