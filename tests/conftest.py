"""Root conftest — test environment, async DB and FastAPI test client.

Invariants:
    - Env vars set before any catalog_api import (Settings is cached on first use)
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB
    - db_manager patched for code that reads it directly (readiness check)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - PRAGMA foreign_keys=ON on connect: SQLite ignores FK actions (SET NULL) without it
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import timedelta  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from catalog_api.config import get_settings  # noqa: E402
from catalog_api.core.security import create_access_token, hash_password  # noqa: E402
from catalog_api.db.base import Base  # noqa: E402
from catalog_api.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from catalog_api.models.admin import Admin  # noqa: E402
import catalog_api.infrastructure.database as db_module  # noqa: E402
from catalog_api.main import app  # noqa: E402

ADMIN_PASSWORD = "correct-horse-battery"


def _enable_foreign_keys(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_admin(test_db):
    """Insert an admin with a hashed password."""
    admin = Admin(username="root", password_hash=hash_password(ADMIN_PASSWORD))
    test_db.add(admin)
    await test_db.commit()
    await test_db.refresh(admin)
    return admin


def make_token(
    admin_id: int = 1,
    username: str = "root",
    role: str = "admin",
    expires_delta: timedelta = timedelta(minutes=5),
    secret: str | None = None,
) -> str:
    settings = get_settings()
    return create_access_token(
        admin_id, username, secret or settings.jwt_secret,
        role=role, algorithm=settings.jwt_algorithm,
        expires_delta=expires_delta,
    )


@pytest.fixture
def admin_headers(seed_admin):
    return {"Authorization": f"Bearer {make_token(seed_admin.id, seed_admin.username)}"}


@pytest.fixture
def token_factory():
    """Build signed tokens with arbitrary role/expiry/secret."""
    return make_token


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD
