"""Route Dependencies — admin authorization gate and per-request service providers.

Invariants:
    - require_admin rejects with three distinguishable outcomes:
      no token → 401 AUTHENTICATION_REQUIRED, bad/expired token → 400 INVALID_TOKEN,
      role != "admin" → 403 FORBIDDEN
    - On success the decoded claims are stored on request.state.admin and returned
    - Service providers build one service per request around the request's session

Design Decisions:
    - HTTPBearer(auto_error=False): FastAPI's built-in rejection can't distinguish our
      three outcomes, so the dependency raises its own CatalogErrors
    - Gating per route via Depends (not app-wide middleware): public GETs stay untouched
"""

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.config import Settings, get_settings
from catalog_api.core.domain_types import Role
from catalog_api.core.errors import (
    AuthenticationRequiredError, ForbiddenError, InvalidTokenError,
)
from catalog_api.core.security import decode_access_token
from catalog_api.infrastructure.database import get_db
from catalog_api.schemas.admin import AdminClaims
from catalog_api.services.admin_service import AdminService
from catalog_api.services.category_service import CategoryService
from catalog_api.services.product_service import ProductService
from catalog_api.services.user_service import UserService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> AdminClaims:
    """Gate a route to holders of a valid admin token."""
    if credentials is None or not credentials.credentials:
        logger.warning(
            "Rejected request without token", extra={"path": request.url.path},
        )
        raise AuthenticationRequiredError()

    payload = decode_access_token(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )
    try:
        claims = AdminClaims.model_validate(payload)
    except ValidationError:
        raise InvalidTokenError("Token payload is malformed")

    if claims.role != Role.ADMIN.value:
        logger.warning(
            f"Rejected role '{claims.role}'", extra={"path": request.url.path},
        )
        raise ForbiddenError(Role.ADMIN.value)

    request.state.admin = claims
    return claims


def get_admin_service(db: AsyncSession = Depends(get_db)) -> AdminService:
    return AdminService(db)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)
