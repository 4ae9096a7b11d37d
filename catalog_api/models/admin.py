"""Admin ORM — accounts allowed to obtain admin access tokens.

Invariants:
    - username is unique (enforced by the storage schema)
    - password_hash holds an argon2 hash, never the plaintext password
    - role is implicit: every row is an admin

Design Decisions:
    - No role column: a second role would need its own table/feature, not a flag here
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.db.base import Base


class Admin(Base):
    """Administrator account."""
    __tablename__ = "admins"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
