"""Product Schemas — request/response contracts for /products.

Invariants:
    - price is a Decimal with at most 8 whole digits and 2 decimal places,
      so whatever validates is stored exactly by numeric(10,2)
    - category_id optional; existence is checked by the FK, not here
    - ProductResponse.category_name is None when the product has no category
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from catalog_api.schemas.common import NamedPayload


class ProductCreate(NamedPayload):
    name: str = Field(min_length=1, max_length=150)
    category_id: int | None = Field(None, ge=1)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class ProductUpdate(ProductCreate):
    pass


class ProductResponse(BaseModel):
    id: int
    name: str
    category_id: int | None
    category_name: str | None
    price: float
    created_at: datetime
