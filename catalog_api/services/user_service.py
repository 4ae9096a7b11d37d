"""User Service — list/get/create/update/delete for the users table.

Invariants:
    - list_all() returns newest first
    - Duplicate email on create/update → ConstraintViolationError (409)
    - update()/delete() on a missing id → ResourceNotFoundError (404)
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import UserId
from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.infrastructure.database import translate_db_errors
from catalog_api.models.user import User
from catalog_api.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Thin persistence wrapper around the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at.desc(), User.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, user_id: UserId) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def create(self, payload: UserCreate) -> User:
        user = User(name=payload.name, email=payload.email)
        async with translate_db_errors(self.db, "create user"):
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        logger.info(
            "User created", extra={"resource": "user", "resource_id": user.id},
        )
        return user

    async def update(self, user_id: UserId, payload: UserUpdate) -> User:
        async with translate_db_errors(self.db, "update user"):
            user = await self.get(user_id)
            user.name = payload.name
            user.email = payload.email
            await self.db.commit()
            await self.db.refresh(user)
        logger.info(
            "User updated", extra={"resource": "user", "resource_id": user_id},
        )
        return user

    async def delete(self, user_id: UserId) -> None:
        async with translate_db_errors(self.db, "delete user"):
            result = await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("User", user_id)
        logger.info(
            "User deleted", extra={"resource": "user", "resource_id": user_id},
        )
