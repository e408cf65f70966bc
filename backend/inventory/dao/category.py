"""
Category Data Access Object (DAO).

WHAT: DAO for category records.

WHY: Category lookups by name back the uniqueness rule, and the
alphabetical listing is the default read for the admin UI.

HOW: Extends BaseDAO with name-based queries. Ordering is delegated to
the database (ORDER BY name ASC) so it follows the store's collation.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.dao.base import BaseDAO
from inventory.models.category import Category


class CategoryDAO(BaseDAO[Category]):
    """
    Data Access Object for Category model.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize CategoryDAO.

        Args:
            session: Async database session
        """
        super().__init__(Category, session)

    async def get_by_name(self, name: str) -> Optional[Category]:
        """
        Get a category by its exact name.

        Args:
            name: Category name (case-sensitive)

        Returns:
            Category if found, None otherwise
        """
        result = await self.session.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()

    async def list_ordered(self) -> List[Category]:
        """
        List all categories sorted by name ascending.

        Returns:
            List of categories (empty when none exist)
        """
        return await self.get_all(order_by="name")
