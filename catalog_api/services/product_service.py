"""Product Service — CRUD for the products table, enriched with the category name.

Invariants:
    - Every read outer-joins categories: category_name is None when category_id is NULL
    - list_all() returns newest first (created_at desc, id desc as tie-breaker)
    - Unknown category_id on create/update → ConstraintViolationError via the FK (409)
    - update()/delete() on a missing id → ResourceNotFoundError (404)

Design Decisions:
    - Returns ProductResponse rather than ORM rows: the joined column has no home on Product
    - Writes re-read through _select_with_category in the same session, so the response
      reflects the committed row plus its current category name
"""

import logging

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import ProductId
from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.infrastructure.database import translate_db_errors
from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.schemas.product import (
    ProductCreate, ProductResponse, ProductUpdate,
)

logger = logging.getLogger(__name__)


def _select_with_category() -> Select:
    return select(Product, Category.name.label("category_name")).outerjoin(
        Category, Product.category_id == Category.id,
    )


def _to_response(product: Product, category_name: str | None) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        category_id=product.category_id,
        category_name=category_name,
        price=product.price,
        created_at=product.created_at,
    )


class ProductService:
    """Persistence wrapper around the products table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[ProductResponse]:
        result = await self.db.execute(
            _select_with_category().order_by(
                Product.created_at.desc(), Product.id.desc(),
            ),
        )
        return [_to_response(p, name) for p, name in result.all()]

    async def get(self, product_id: ProductId) -> ProductResponse:
        # populate_existing: a category delete may have nulled category_id behind our back
        result = await self.db.execute(
            _select_with_category()
            .where(Product.id == product_id)
            .execution_options(populate_existing=True),
        )
        row = result.one_or_none()
        if row is None:
            raise ResourceNotFoundError("Product", product_id)
        return _to_response(row[0], row[1])

    async def create(self, payload: ProductCreate) -> ProductResponse:
        product = Product(
            name=payload.name,
            category_id=payload.category_id,
            price=payload.price,
        )
        async with translate_db_errors(self.db, "create product"):
            self.db.add(product)
            await self.db.commit()
        logger.info(
            f"Product created: {product.name}",
            extra={"resource": "product", "resource_id": product.id},
        )
        return await self.get(product.id)

    async def update(
        self, product_id: ProductId, payload: ProductUpdate,
    ) -> ProductResponse:
        async with translate_db_errors(self.db, "update product"):
            product = await self.db.get(Product, product_id)
            if product is None:
                raise ResourceNotFoundError("Product", product_id)
            product.name = payload.name
            product.category_id = payload.category_id
            product.price = payload.price
            await self.db.commit()
        logger.info(
            "Product updated",
            extra={"resource": "product", "resource_id": product_id},
        )
        return await self.get(product_id)

    async def delete(self, product_id: ProductId) -> None:
        async with translate_db_errors(self.db, "delete product"):
            result = await self.db.execute(
                delete(Product).where(Product.id == product_id),
            )
            await self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("Product", product_id)
        logger.info(
            "Product deleted",
            extra={"resource": "product", "resource_id": product_id},
        )
