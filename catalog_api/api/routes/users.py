"""User Routes — public registration and reads; admin-gated update/delete.

Design Decisions:
    - PUT/DELETE gated behind require_admin: anonymous callers can register and read,
      but not rewrite or remove other people's records
"""

import logging

from fastapi import APIRouter, Depends, status

from catalog_api.api.dependencies import get_user_service, require_admin
from catalog_api.schemas.common import MessageResponse
from catalog_api.schemas.user import UserCreate, UserResponse, UserUpdate
from catalog_api.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    return await service.get(user_id)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create(body)


@router.put(
    "/{user_id}", response_model=UserResponse,
    dependencies=[Depends(require_admin)],
)
async def update_user(
    user_id: int,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return await service.update(user_id, body)


@router.delete(
    "/{user_id}", response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    await service.delete(user_id)
    return MessageResponse(message="User deleted successfully")
