"""
Database models package.

WHY: Centralizing model imports ensures Alembic can discover all models
for migration generation and makes it easier to import models elsewhere.
"""

from inventory.models.base import Base, TimestampMixin, PrimaryKeyMixin
from inventory.models.category import Category
from inventory.models.product import Product

__all__ = [
    "Base",
    "TimestampMixin",
    "PrimaryKeyMixin",
    "Category",
    "Product",
]
