"""
Product Service.

WHAT: Business logic for product operations.

WHY: The service layer:
1. Checks that referenced categories exist before writing
2. Validates field constraints (name length, price >= 0, stock >= 0)
3. Re-reads every written product with its category so responses show
   exactly what the database holds

HOW: Orchestrates ProductDAO and CategoryDAO. The category check is there
to produce a clear error; the RESTRICT foreign key in the database is what
actually guarantees integrity if a category disappears between the check
and the write.
"""

import logging
from typing import Any, List, Mapping, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from inventory.core.exceptions import (
    CategoryNotFoundError,
    DatabaseError,
    ResourceNotFoundError,
)
from inventory.dao.category import CategoryDAO
from inventory.dao.product import ProductDAO
from inventory.models.product import Product
from inventory.schemas.common import validate_payload
from inventory.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

_id_adapter = TypeAdapter(int)


def _coerce_id(value: Any) -> Optional[int]:
    """Parse an ID the way the input schemas would, or None if it is not one."""
    try:
        return _id_adapter.validate_python(value)
    except PydanticValidationError:
        return None


class ProductService:
    """
    Service for product lifecycle operations.
    """

    def __init__(self, product_dao: ProductDAO, category_dao: CategoryDAO):
        """
        Initialize ProductService.

        Args:
            product_dao: Product data access
            category_dao: Category data access, for existence checks
        """
        self.product_dao = product_dao
        self.category_dao = category_dao

    async def list_products(self) -> List[Product]:
        """
        List all products sorted by name, each with its category.

        Raises:
            DatabaseError: If the store fails
        """
        try:
            return await self.product_dao.list_with_category()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list products: {e}")
            raise DatabaseError(message=f"Error fetching products: {e}")

    async def get_product(self, product_id: int) -> Product:
        """
        Get a product with its category.

        Raises:
            ResourceNotFoundError: If no product has this ID
        """
        product = await self.product_dao.get_with_category(product_id)
        if not product:
            raise ResourceNotFoundError(
                message="Product not found",
                resource_type="Product",
                resource_id=product_id,
            )
        return product

    async def create_product(self, attrs: Mapping[str, Any]) -> Product:
        """
        Create a product.

        Args:
            attrs: Product attributes (name, description, price, stock, category_id)

        Returns:
            The stored product, re-read with its category

        Raises:
            CategoryNotFoundError: If category_id references no category
            ValidationError: If any field violates its constraints
            DatabaseError: If the store fails
        """
        if attrs.get("category_id") is not None:
            await self._ensure_category_exists(attrs["category_id"])

        data = validate_payload(ProductCreate, attrs)

        try:
            product = await self.product_dao.create(**data.model_dump())
        except IntegrityError:
            # Category deleted between the check and the insert
            raise CategoryNotFoundError(category_id=data.category_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create product {data.name!r}: {e}")
            raise DatabaseError(message=f"Error creating product: {e}")

        logger.info(f"Created product {product.id} ({product.name!r}) in category {product.category_id}")
        return await self.get_product(product.id)

    async def update_product(self, product_id: int, attrs: Mapping[str, Any]) -> Product:
        """
        Partially update a product.

        Only the supplied fields change. The category is re-checked only
        when ``category_id`` is part of the payload.

        Returns:
            The stored product, re-read with its category

        Raises:
            ResourceNotFoundError: If no product has this ID
            CategoryNotFoundError: If a new category_id references no category
            ValidationError: If any supplied field violates its constraints
            DatabaseError: If the store fails
        """
        await self.get_product(product_id)

        if attrs.get("category_id") is not None:
            await self._ensure_category_exists(attrs["category_id"])

        data = validate_payload(ProductUpdate, attrs)
        changes = data.model_dump(exclude_unset=True)

        try:
            await self.product_dao.update(product_id, **changes)
        except IntegrityError:
            raise CategoryNotFoundError(category_id=changes.get("category_id"))
        except SQLAlchemyError as e:
            logger.error(f"Failed to update product {product_id}: {e}")
            raise DatabaseError(message=f"Error updating product: {e}")

        logger.info(f"Updated product {product_id} ({', '.join(sorted(changes)) or 'no changes'})")
        return await self.get_product(product_id)

    async def delete_product(self, product_id: int) -> str:
        """
        Delete a product.

        Returns:
            Confirmation message

        Raises:
            ResourceNotFoundError: If no product has this ID
        """
        await self.get_product(product_id)
        await self.product_dao.delete(product_id)
        logger.info(f"Deleted product {product_id}")
        return "Product deleted successfully"

    async def get_products_by_category(self, category_id: int) -> List[Product]:
        """
        List the products of one category, sorted by name.

        Returns:
            Products in the category (empty list when it has none)

        Raises:
            ResourceNotFoundError: If no category has this ID
        """
        if not await self.category_dao.get_by_id(category_id):
            raise ResourceNotFoundError(
                message="Category not found",
                resource_type="Category",
                resource_id=category_id,
            )
        return await self.product_dao.list_with_category(category_id=category_id)

    async def _ensure_category_exists(self, raw_category_id: Any) -> None:
        category_id = _coerce_id(raw_category_id)
        if category_id is None:
            # Malformed ID; schema validation reports it
            return
        if not await self.category_dao.exists(id=category_id):
            logger.warning(f"Rejected product write: category {category_id} does not exist")
            raise CategoryNotFoundError(category_id=category_id)
