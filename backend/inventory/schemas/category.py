"""
Pydantic schemas for category endpoints.

WHY: Schemas define request/response contracts for category management,
providing validation, documentation, and type safety.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inventory.models.category import CATEGORY_NAME_MAX_LENGTH, CATEGORY_NAME_MIN_LENGTH


class CategoryCreate(BaseModel):
    """
    Category creation request schema.
    """

    name: str = Field(
        ...,
        min_length=CATEGORY_NAME_MIN_LENGTH,
        max_length=CATEGORY_NAME_MAX_LENGTH,
        description="Category name (unique)",
    )

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={"example": {"name": "Electronics"}},
    )


class CategoryUpdate(CategoryCreate):
    """
    Category update request schema.

    WHY: Name is the only mutable field, so an update carries it like a create.
    """


class CategoryResponse(BaseModel):
    """
    Category response schema.
    """

    id: int = Field(..., description="Category ID")
    name: str = Field(..., description="Category name")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Electronics",
                "created_at": "2025-10-12T10:30:00",
                "updated_at": "2025-10-12T10:30:00",
            }
        },
    )


class CategorySummary(BaseModel):
    """Denormalised {id, name} view embedded in products."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
