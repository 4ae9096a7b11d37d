"""Product ORM — priced item, optionally filed under a category.

Invariants:
    - category_id is NULL or references an existing category
    - ON DELETE SET NULL: removing the category detaches, never deletes, the product
    - price is numeric(10,2), read back as float
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base


class Product(Base):
    """Product entity."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True,
    )
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    category: Mapped[Optional["Category"]] = relationship(
        "Category", back_populates="products",
    )
