"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer autoincrement primary keys; timestamps set in Python at insert

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from catalog_api.models.admin import Admin  # noqa: F401
from catalog_api.models.category import Category  # noqa: F401
from catalog_api.models.product import Product  # noqa: F401
from catalog_api.models.user import User  # noqa: F401
