"""
Pydantic schemas for product endpoints.

WHAT: Request/response schemas for product management API.

WHY: Schemas define API contracts for product operations:
1. Validate incoming request data (name length, non-negative price/stock)
2. Document API for OpenAPI/Swagger
3. Control how fields are rendered (price as a two-decimal string)

HOW: Uses Pydantic v2 with Field constraints and ORM mode for SQLAlchemy.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from inventory.models.product import PRODUCT_NAME_MAX_LENGTH, PRODUCT_NAME_MIN_LENGTH
from inventory.schemas.category import CategorySummary

# NUMERIC(10, 2): cents precision, at most 8 digits before the point
PRICE_QUANTUM = Decimal("0.01")
PRICE_LIMIT = Decimal("100000000")


def quantize_price(value: Optional[Decimal]) -> Optional[Decimal]:
    """
    Round a price to cents, the way the price column stores it.

    Extra decimal places are rounded half-up rather than rejected
    (19.999 becomes 20.00).

    Raises:
        ValueError: If the rounded price does not fit the column
    """
    if value is None:
        return value
    if value < PRICE_LIMIT:
        value = value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if value >= PRICE_LIMIT:
        raise ValueError(f"Price must be less than {PRICE_LIMIT}")
    return value


class ProductCreate(BaseModel):
    """
    Product creation request schema.
    """

    name: str = Field(
        ...,
        min_length=PRODUCT_NAME_MIN_LENGTH,
        max_length=PRODUCT_NAME_MAX_LENGTH,
        description="Product name",
    )
    description: Optional[str] = Field(default=None, description="Free-form description")
    price: Decimal = Field(..., ge=0, description="Unit price, rounded to cents")
    stock: int = Field(default=0, ge=0, description="Units in stock")
    category_id: int = Field(..., description="ID of an existing category")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Laptop",
                "description": "Gaming laptop",
                "price": 1000,
                "stock": 10,
                "category_id": 1,
            }
        },
    )

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Decimal) -> Decimal:
        return quantize_price(value)


class ProductUpdate(BaseModel):
    """
    Product update request schema.

    WHY: Allows partial updates. Omitted fields keep their stored values;
    an explicit null is only accepted for the optional description.
    """

    name: Optional[str] = Field(
        default=None,
        min_length=PRODUCT_NAME_MIN_LENGTH,
        max_length=PRODUCT_NAME_MAX_LENGTH,
    )
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[int] = None

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={"example": {"price": 900}},
    )

    @field_validator("name", "price", "stock", "category_id")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        return quantize_price(value)


class ProductResponse(BaseModel):
    """
    Product response schema.
    """

    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int
    category_id: int
    category: Optional[CategorySummary] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Laptop",
                "description": "Gaming laptop",
                "price": "1000.00",
                "stock": 10,
                "category_id": 1,
                "category": {"id": 1, "name": "Electronics"},
                "created_at": "2025-10-12T10:30:00",
                "updated_at": "2025-10-12T10:30:00",
            }
        },
    )

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> str:
        return f"{price:.2f}"
