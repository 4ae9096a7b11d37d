"""Category ORM — product grouping.

Invariants:
    - name is unique
    - Deleting a category never deletes products: products.category_id is SET NULL by the DB
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base


class Category(Base):
    """Category entity."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # passive_deletes: let ON DELETE SET NULL do the work instead of ORM UPDATEs
    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="category", passive_deletes=True,
    )
