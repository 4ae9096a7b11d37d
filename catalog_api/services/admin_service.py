"""Admin Service — credential check, token issuing, and account management.

Invariants:
    - login() fails identically for unknown username and wrong password
    - Only argon2 hashes are written to admins.password_hash
    - Issued tokens always carry role="admin"

Design Decisions:
    - Token lifetime and secret injected from Settings by the caller (route or CLI),
      keeping this class free of global config
"""

import logging
from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.errors import (
    ConstraintViolationError, InvalidCredentialsError, ResourceNotFoundError,
)
from catalog_api.core.security import (
    create_access_token, hash_password, verify_password,
)
from catalog_api.infrastructure.database import translate_db_errors
from catalog_api.models.admin import Admin

logger = logging.getLogger(__name__)


class AdminService:
    """Admin accounts and login."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_username(self, username: str) -> Admin | None:
        result = await self.db.execute(
            select(Admin).where(Admin.username == username),
        )
        return result.scalar_one_or_none()

    async def login(
        self,
        username: str,
        password: str,
        *,
        secret: str,
        algorithm: str,
        expires_delta: timedelta,
    ) -> str:
        """Verify credentials and return a signed access token."""
        admin = await self.find_by_username(username)
        stored_hash = admin.password_hash if admin else None
        if not verify_password(password, stored_hash):
            logger.warning("Admin login rejected")
            raise InvalidCredentialsError()
        logger.info("Admin logged in", extra={"admin_id": admin.id})
        return create_access_token(
            admin.id, admin.username, secret,
            algorithm=algorithm, expires_delta=expires_delta,
        )

    async def list_all(self) -> list[Admin]:
        result = await self.db.execute(select(Admin).order_by(Admin.id))
        return list(result.scalars().all())

    async def create(self, username: str, password: str) -> Admin:
        if await self.find_by_username(username) is not None:
            raise ConstraintViolationError(f"Admin '{username}' already exists")
        admin = Admin(username=username, password_hash=hash_password(password))
        async with translate_db_errors(self.db, "create admin"):
            self.db.add(admin)
            await self.db.commit()
            await self.db.refresh(admin)
        logger.info("Admin created", extra={"admin_id": admin.id})
        return admin

    async def set_password(self, username: str, password: str) -> None:
        admin = await self._get_by_username(username)
        async with translate_db_errors(self.db, "update admin password"):
            admin.password_hash = hash_password(password)
            await self.db.commit()
        logger.info("Admin password changed", extra={"admin_id": admin.id})

    async def delete(self, username: str) -> None:
        admin = await self._get_by_username(username)
        async with translate_db_errors(self.db, "delete admin"):
            await self.db.delete(admin)
            await self.db.commit()
        logger.info("Admin deleted", extra={"admin_id": admin.id})

    async def _get_by_username(self, username: str) -> Admin:
        admin = await self.find_by_username(username)
        if admin is None:
            raise ResourceNotFoundError("Admin", username)
        return admin
