"""Category Routes — public reads, admin-gated writes.

Invariants:
    - Write paths keep the /create, /edit/{id}, /delete/{id} shape
    - Routes hold no logic: one service call, one response model
"""

import logging

from fastapi import APIRouter, Depends, status

from catalog_api.api.dependencies import get_category_service, require_admin
from catalog_api.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate,
)
from catalog_api.schemas.common import MessageResponse
from catalog_api.services.category_service import CategoryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
):
    return await service.list_all()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    return await service.get(category_id)


@router.post(
    "/create", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_category(
    body: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    return await service.create(body)


@router.put(
    "/edit/{category_id}", response_model=CategoryResponse,
    dependencies=[Depends(require_admin)],
)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return await service.update(category_id, body)


@router.delete(
    "/delete/{category_id}", response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category. Its products stay, with category_id set to null."""
    await service.delete(category_id)
    return MessageResponse(message="Category deleted successfully")
