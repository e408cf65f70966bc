"""
Category model.

WHY: Categories group products. Every product belongs to exactly one
category, so categories must exist before products can reference them.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from inventory.models.base import Base, TimestampMixin, PrimaryKeyMixin

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 150


class Category(Base, PrimaryKeyMixin, TimestampMixin):
    """
    Category model.

    The name is unique across all categories (exact, case-sensitive match).
    """

    __tablename__ = "categories"

    name = Column(String(CATEGORY_NAME_MAX_LENGTH), nullable=False, unique=True)

    # WHY: passive_deletes leaves referential actions to the database; the
    # RESTRICT foreign key on products.category_id blocks orphaning.
    products = relationship(
        "Product",
        back_populates="category",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
