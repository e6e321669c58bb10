"""Product CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from catalog.application.schemas import ProductCreate, ProductUpdate, ProductResponse
from catalog.application.services import ProductService
from catalog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from catalog.infrastructure.dependencies import get_product_service

router = APIRouter(prefix="/products", tags=["Products"])

# Ids are stored as signed 64-bit integers.
ProductId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@router.get("", response_model=list[ProductResponse])
async def list_products(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve all products, optionally paginated."""
    products = await service.list_products(skip=skip, limit=limit)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Retrieve a single product by ID."""
    try:
        product = await service.get_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a new product."""
    try:
        product = await service.create_product(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: ProductId,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Update an existing product."""
    try:
        product = await service.update_product(product_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete a product by ID."""
    try:
        await service.delete_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
