"""
Category Service.

WHAT: Business logic for category operations.

WHY: The service layer:
1. Enforces name uniqueness before the database has to
2. Refuses to delete categories that products still reference
3. Classifies every failure into a structured exception

HOW: Orchestrates CategoryDAO (and ProductDAO for the in-use check).
DAOs are injected so the service never reaches for a global session.
"""

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from inventory.core.exceptions import (
    CategoryInUseError,
    DatabaseError,
    DuplicateNameError,
    ResourceNotFoundError,
)
from inventory.dao.category import CategoryDAO
from inventory.dao.product import ProductDAO
from inventory.models.category import Category
from inventory.schemas.category import CategoryCreate, CategoryUpdate
from inventory.schemas.common import validate_payload

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Service for category lifecycle operations.
    """

    def __init__(self, category_dao: CategoryDAO, product_dao: ProductDAO):
        """
        Initialize CategoryService.

        Args:
            category_dao: Category data access
            product_dao: Product data access, used to detect categories in use
        """
        self.category_dao = category_dao
        self.product_dao = product_dao

    async def list_categories(self) -> List[Category]:
        """
        List all categories sorted by name.

        Returns:
            Categories ordered by name ascending (empty list when none)

        Raises:
            DatabaseError: If the store fails
        """
        try:
            return await self.category_dao.list_ordered()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list categories: {e}")
            raise DatabaseError(message=f"Error fetching categories: {e}")

    async def get_category(self, category_id: int) -> Category:
        """
        Get a category by ID.

        Raises:
            ResourceNotFoundError: If no category has this ID
        """
        category = await self.category_dao.get_by_id(category_id)
        if not category:
            raise ResourceNotFoundError(
                message="Category not found",
                resource_type="Category",
                resource_id=category_id,
            )
        return category

    async def create_category(self, attrs: Mapping[str, Any]) -> Category:
        """
        Create a category.

        Args:
            attrs: Category attributes (``name``)

        Returns:
            The created category with its assigned ID

        Raises:
            ValidationError: If the name is empty or not 2-150 characters
            DuplicateNameError: If a category with this exact name exists
            DatabaseError: If the store fails
        """
        data = validate_payload(CategoryCreate, attrs)
        await self._ensure_name_available(data.name)

        try:
            category = await self.category_dao.create(name=data.name)
        except IntegrityError:
            # Lost a race with a concurrent create of the same name
            raise DuplicateNameError(name=data.name)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create category {data.name!r}: {e}")
            raise DatabaseError(message=f"Error creating category: {e}")

        logger.info(f"Created category {category.id} ({category.name!r})")
        return category

    async def update_category(self, category_id: int, attrs: Mapping[str, Any]) -> Category:
        """
        Rename a category.

        Renaming a category to its current name is allowed.

        Raises:
            ResourceNotFoundError: If no category has this ID
            ValidationError: If the new name is invalid
            DuplicateNameError: If another category already has the name
            DatabaseError: If the store fails
        """
        await self.get_category(category_id)
        data = validate_payload(CategoryUpdate, attrs)
        await self._ensure_name_available(data.name, exclude_id=category_id)

        try:
            category = await self.category_dao.update(category_id, name=data.name)
        except IntegrityError:
            raise DuplicateNameError(name=data.name)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update category {category_id}: {e}")
            raise DatabaseError(message=f"Error updating category: {e}")

        logger.info(f"Updated category {category_id} ({data.name!r})")
        return category

    async def delete_category(self, category_id: int) -> str:
        """
        Delete a category that no product references.

        Returns:
            Confirmation message

        Raises:
            ResourceNotFoundError: If no category has this ID
            CategoryInUseError: If any product still references the category
        """
        await self.get_category(category_id)

        product_count = await self.product_dao.count_by_category(category_id)
        if product_count:
            logger.warning(
                f"Refused to delete category {category_id}: {product_count} products reference it"
            )
            raise CategoryInUseError(
                message=f"Category has {product_count} product(s) and cannot be deleted",
                category_id=category_id,
                product_count=product_count,
            )

        try:
            await self.category_dao.delete(category_id)
        except IntegrityError:
            # A product was added after the count above
            raise CategoryInUseError(category_id=category_id)

        logger.info(f"Deleted category {category_id}")
        return "Category deleted successfully"

    async def _ensure_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        existing = await self.category_dao.get_by_name(name)
        if existing and existing.id != exclude_id:
            logger.warning(f"Rejected duplicate category name {name!r}")
            raise DuplicateNameError(name=name, existing_id=existing.id)
