"""Admin Routes — login and the token-gated dashboard.

Invariants:
    - POST /admin/login never reveals whether the username exists
    - GET /admin/dashboard echoes the claims require_admin attached to the request
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, Request

from catalog_api.api.dependencies import get_admin_service, require_admin
from catalog_api.config import Settings, get_settings
from catalog_api.schemas.admin import (
    AdminClaims, AdminLogin, DashboardResponse, LoginResponse,
)
from catalog_api.services.admin_service import AdminService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: AdminLogin,
    service: AdminService = Depends(get_admin_service),
    settings: Settings = Depends(get_settings),
):
    """Exchange admin credentials for a bearer token."""
    expires = timedelta(minutes=settings.jwt_expire_minutes)
    token = await service.login(
        body.username, body.password,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_delta=expires,
    )
    return LoginResponse(
        token=token, expires_in=int(expires.total_seconds()),
    )


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    dependencies=[Depends(require_admin)],
)
async def dashboard(request: Request):
    admin: AdminClaims = request.state.admin
    return DashboardResponse(
        message=f"Welcome to the admin dashboard, {admin.username}",
        admin=admin,
    )
