"""Liveness and readiness endpoints.

Invariants:
    - GET /health/ answers 200 while the process is up; it never touches the database
    - GET /health/ready answers 200 only after SELECT 1 succeeds on the pool;
      otherwise DatabaseConnectionError surfaces as the standard 503 envelope
"""

from fastapi import APIRouter

from catalog_api.core.errors import DatabaseConnectionError
from catalog_api.infrastructure.database import get_db_manager

router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "catalog-api"


@router.get("/")
async def liveness():
    return {"status": "alive", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    """Ping the pool. No manager means the lifespan has not opened one yet."""
    manager = get_db_manager()
    if manager is None:
        raise DatabaseConnectionError("readiness check")
    await manager.ping()
    return {"status": "ready", "service": SERVICE_NAME, "database": "reachable"}
