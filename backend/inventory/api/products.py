"""
Product management API endpoints.

WHY: These endpoints provide product CRUD operations plus listing by
category. Every product in a response carries its {id, name} category view.

Status codes for a missing category differ by call site: a product write
that references one is a bad request (400), while listing the products of
a missing category is a missing resource (404).
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from inventory.core.deps import get_product_service
from inventory.schemas.common import ApiResponse, ErrorResponse, MessageResponse, json_body
from inventory.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from inventory.services.product_service import ProductService


router = APIRouter(prefix="/products", tags=["products"])


def _many(products) -> ApiResponse[List[ProductResponse]]:
    return ApiResponse[List[ProductResponse]](
        data=[ProductResponse.model_validate(p) for p in products]
    )


def _one(product) -> ApiResponse[ProductResponse]:
    return ApiResponse[ProductResponse](data=ProductResponse.model_validate(product))


@router.get(
    "",
    response_model=ApiResponse[List[ProductResponse]],
    status_code=status.HTTP_200_OK,
    summary="List products",
    description="List all products sorted by name, with their category",
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[List[ProductResponse]]:
    return _many(await service.list_products())


@router.get(
    "/category/{category_id}",
    response_model=ApiResponse[List[ProductResponse]],
    status_code=status.HTTP_200_OK,
    summary="List products in a category",
    responses={404: {"model": ErrorResponse}},
)
async def list_products_by_category(
    category_id: int,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[List[ProductResponse]]:
    """
    List the products of one category.

    Raises:
        ResourceNotFoundError (404): If category not found
    """
    return _many(await service.get_products_by_category(category_id))


@router.get(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    status_code=status.HTTP_200_OK,
    summary="Get product by ID",
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    return _one(await service.get_product(product_id))


@router.post(
    "",
    response_model=ApiResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    responses={400: {"model": ErrorResponse}},
    openapi_extra=json_body(ProductCreate),
)
async def create_product(
    attrs: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """
    Create a new product.

    The category is checked before the other fields, so a missing
    category is reported even when the body has other problems.

    Raises:
        CategoryNotFoundError (400): If category_id references no category
        ValidationError (400): If any field is invalid
    """
    return _one(await service.create_product(attrs))


@router.put(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    status_code=status.HTTP_200_OK,
    summary="Update product",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    openapi_extra=json_body(ProductUpdate),
)
async def update_product(
    product_id: int,
    attrs: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """
    Partially update a product; omitted fields keep their values.

    Raises:
        ResourceNotFoundError (404): If product not found
        CategoryNotFoundError (400): If a new category_id references no category
        ValidationError (400): If any supplied field is invalid
    """
    return _one(await service.update_product(product_id, attrs))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete product",
    responses={404: {"model": ErrorResponse}},
)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    return MessageResponse(message=await service.delete_product(product_id))
