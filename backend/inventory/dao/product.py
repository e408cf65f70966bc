"""
Product Data Access Object (DAO).

WHAT: DAO for product records and their category join.

WHY: Every product read returns the denormalised category view, so the
queries here always eager-load the category relationship.

HOW: Extends BaseDAO with joined reads. Reads use populate_existing so a
product already in the session's identity map is reloaded from the
database instead of being served from memory.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory.dao.base import BaseDAO
from inventory.models.product import Product


class ProductDAO(BaseDAO[Product]):
    """
    Data Access Object for Product model.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize ProductDAO.

        Args:
            session: Async database session
        """
        super().__init__(Product, session)

    def _joined(self):
        return (
            select(Product)
            .options(selectinload(Product.category))
            .execution_options(populate_existing=True)
        )

    async def get_with_category(self, product_id: int) -> Optional[Product]:
        """
        Get a product with its category loaded.

        WHY: Used after every write so the response reflects exactly what
        the database holds, including store defaults and the current
        category name.

        Args:
            product_id: Product ID

        Returns:
            Product with ``category`` populated, or None
        """
        result = await self.session.execute(self._joined().where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def list_with_category(self, category_id: Optional[int] = None) -> List[Product]:
        """
        List products sorted by name, each with its category loaded.

        Args:
            category_id: Only return products in this category

        Returns:
            List of products (empty when none match)
        """
        query = self._joined()
        if category_id is not None:
            query = query.where(Product.category_id == category_id)
        query = query.order_by(Product.name.asc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by_category(self, category_id: int) -> int:
        """
        Count products referencing a category.

        Args:
            category_id: Category ID

        Returns:
            Number of products in the category
        """
        return await self.count(category_id=category_id)
