"""
FastAPI dependencies that build the service layer.

WHY: Each request gets service objects wired to that request's database
session. Routes never construct DAOs or touch the session themselves, and
tests can override ``get_db`` to run everything against a test database.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.dao.category import CategoryDAO
from inventory.dao.product import ProductDAO
from inventory.db.session import get_db
from inventory.services.category_service import CategoryService
from inventory.services.product_service import ProductService


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    """
    Build a CategoryService for the current request.

    Usage:
        @router.get("")
        async def list_categories(service: CategoryService = Depends(get_category_service)):
            ...
    """
    return CategoryService(CategoryDAO(db), ProductDAO(db))


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    """Build a ProductService for the current request."""
    return ProductService(ProductDAO(db), CategoryDAO(db))
