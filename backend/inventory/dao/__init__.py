"""
Data Access Object (DAO) package.

WHY: DAOs provide a clean separation between database operations and business logic,
making the codebase more testable and maintainable.
"""

from inventory.dao.base import BaseDAO
from inventory.dao.category import CategoryDAO
from inventory.dao.product import ProductDAO

__all__ = [
    "BaseDAO",
    "CategoryDAO",
    "ProductDAO",
]
