"""Category Service — list/get/create/update/delete for the categories table.

Invariants:
    - list_all() returns newest first (created_at desc, id desc as tie-breaker)
    - update() and delete() raise ResourceNotFoundError when no row matches
    - Writes run inside translate_db_errors (duplicate name → ConstraintViolationError)
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import CategoryId
from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.infrastructure.database import translate_db_errors
from catalog_api.models.category import Category
from catalog_api.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Thin persistence wrapper around the categories table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Category]:
        result = await self.db.execute(
            select(Category).order_by(
                Category.created_at.desc(), Category.id.desc(),
            ),
        )
        return list(result.scalars().all())

    async def get(self, category_id: CategoryId) -> Category:
        category = await self.db.get(Category, category_id)
        if category is None:
            raise ResourceNotFoundError("Category", category_id)
        return category

    async def create(self, payload: CategoryCreate) -> Category:
        category = Category(name=payload.name)
        async with translate_db_errors(self.db, "create category"):
            self.db.add(category)
            await self.db.commit()
            await self.db.refresh(category)
        logger.info(
            f"Category created: {category.name}",
            extra={"resource": "category", "resource_id": category.id},
        )
        return category

    async def update(
        self, category_id: CategoryId, payload: CategoryUpdate,
    ) -> Category:
        async with translate_db_errors(self.db, "update category"):
            category = await self.get(category_id)
            category.name = payload.name
            await self.db.commit()
            await self.db.refresh(category)
        logger.info(
            "Category updated",
            extra={"resource": "category", "resource_id": category_id},
        )
        return category

    async def delete(self, category_id: CategoryId) -> None:
        async with translate_db_errors(self.db, "delete category"):
            result = await self.db.execute(
                delete(Category).where(Category.id == category_id),
            )
            await self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("Category", category_id)
        logger.info(
            "Category deleted",
            extra={"resource": "category", "resource_id": category_id},
        )
