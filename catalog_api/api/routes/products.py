"""Product Routes — public reads (with category name), admin-gated writes."""

import logging

from fastapi import APIRouter, Depends, status

from catalog_api.api.dependencies import get_product_service, require_admin
from catalog_api.schemas.common import MessageResponse
from catalog_api.schemas.product import (
    ProductCreate, ProductResponse, ProductUpdate,
)
from catalog_api.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    service: ProductService = Depends(get_product_service),
):
    return await service.list_all()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    return await service.get(product_id)


@router.post(
    "/create", response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_product(
    body: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return await service.create(body)


@router.put(
    "/edit/{product_id}", response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
)
async def update_product(
    product_id: int,
    body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return await service.update(product_id, body)


@router.delete(
    "/delete/{product_id}", response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    await service.delete(product_id)
    return MessageResponse(message="Product deleted successfully")
