"""Domain Types — identity aliases and enums shared across layers.

Invariants:
    - Primary keys are integers; aliases keep signatures self-describing
    - Roles encoded as an Enum — no raw string matching in auth code

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize into JWT claims and JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AdminId = NewType("AdminId", int)
CategoryId = NewType("CategoryId", int)
ProductId = NewType("ProductId", int)
UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Role claim carried in access tokens. Only ADMIN unlocks gated routes."""
    ADMIN = "admin"


class DatabaseDialect(str, Enum):
    """Supported DB_DIALECT values and the async driver each one uses."""
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"

    @property
    def drivername(self) -> str:
        return {
            DatabaseDialect.POSTGRES: "postgresql+asyncpg",
            DatabaseDialect.MYSQL: "mysql+aiomysql",
            DatabaseDialect.SQLITE: "sqlite+aiosqlite",
        }[self]
