"""Category Schemas — request/response contracts for /categories.

Invariants:
    - CategoryCreate.name: 1-100 chars after stripping
    - CategoryUpdate carries the full replacement field set (PUT semantics)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.schemas.common import NamedPayload


class CategoryCreate(NamedPayload):
    name: str = Field(min_length=1, max_length=100)


class CategoryUpdate(CategoryCreate):
    pass


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
