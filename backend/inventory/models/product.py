"""
Product model.

WHY: Products are the stocked items. Each one references its category
through a foreign key so a product can never point at a missing category.
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from inventory.models.base import Base, TimestampMixin, PrimaryKeyMixin

PRODUCT_NAME_MIN_LENGTH = 2
PRODUCT_NAME_MAX_LENGTH = 150


class Product(Base, PrimaryKeyMixin, TimestampMixin):
    """
    Product model.

    Price is stored as NUMERIC(10, 2) so it round-trips with exactly two
    decimal places. Stock defaults to 0.
    """

    __tablename__ = "products"

    name = Column(String(PRODUCT_NAME_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0, server_default="0")

    # WHY: RESTRICT makes the database refuse to delete a category that
    # still has products, independently of the service-level check.
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # WHY: selectin keeps the {id, name} category view available on every
    # loaded product without lazy IO, which async sessions cannot do.
    category = relationship("Category", back_populates="products", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name}, category_id={self.category_id})>"
