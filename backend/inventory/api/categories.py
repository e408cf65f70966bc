"""
Category management API endpoints.

WHY: These endpoints provide category CRUD operations:
1. GET / - List categories (alphabetical)
2. GET /{category_id} - Get category by ID
3. POST / - Create category (unique name)
4. PUT /{category_id} - Rename category
5. DELETE /{category_id} - Delete category without products
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from inventory.core.deps import get_category_service
from inventory.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from inventory.schemas.common import ApiResponse, ErrorResponse, MessageResponse, json_body
from inventory.services.category_service import CategoryService


router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=ApiResponse[List[CategoryResponse]],
    status_code=status.HTTP_200_OK,
    summary="List categories",
    description="List all categories sorted by name",
)
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[List[CategoryResponse]]:
    categories = await service.list_categories()
    return ApiResponse[List[CategoryResponse]](
        data=[CategoryResponse.model_validate(c) for c in categories]
    )


@router.get(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    status_code=status.HTTP_200_OK,
    summary="Get category by ID",
    responses={404: {"model": ErrorResponse}},
)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """
    Get category by ID.

    Raises:
        ResourceNotFoundError (404): If category not found
    """
    category = await service.get_category(category_id)
    return ApiResponse[CategoryResponse](data=CategoryResponse.model_validate(category))


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    openapi_extra=json_body(CategoryCreate),
)
async def create_category(
    attrs: Dict[str, Any] = Body(...),
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """
    Create a new category.

    Raises:
        ValidationError (400): If the name is not 2-150 characters
        DuplicateNameError (409): If the name is already taken
    """
    category = await service.create_category(attrs)
    return ApiResponse[CategoryResponse](data=CategoryResponse.model_validate(category))


@router.put(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    status_code=status.HTTP_200_OK,
    summary="Update category",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    openapi_extra=json_body(CategoryUpdate),
)
async def update_category(
    category_id: int,
    attrs: Dict[str, Any] = Body(...),
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """
    Rename a category.

    The category is looked up before the new name is validated, so a
    missing category is a 404 whatever the body holds.

    Raises:
        ResourceNotFoundError (404): If category not found
        ValidationError (400): If the name is not 2-150 characters
        DuplicateNameError (409): If another category has the name
    """
    category = await service.update_category(category_id, attrs)
    return ApiResponse[CategoryResponse](data=CategoryResponse.model_validate(category))


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete category",
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """
    Delete a category.

    Raises:
        ResourceNotFoundError (404): If category not found
        CategoryInUseError (409): If products still reference the category
    """
    message = await service.delete_category(category_id)
    return MessageResponse(message=message)
