"""Database Session Manager — process-wide async connection pool with error translation.

Invariants:
    - Exactly one DatabaseSessionManager per process, created by init_db() at startup
      and disposed by close_db() at shutdown — never created lazily
    - Every SQLAlchemy exception is rolled back and mapped to a CatalogError:
      IntegrityError → ConstraintViolationError (409),
      OperationalError/InterfaceError → DatabaseConnectionError (503),
      anything else → DatabaseError (500)
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - translate_db_errors() is usable on any AsyncSession: services wrap their writes in it,
      so the mapping also applies to sessions that did not come from the manager (tests, CLI)
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, InterfaceError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from catalog_api.core.errors import (
    ConstraintViolationError, DatabaseConnectionError, DatabaseError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_db_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[AsyncSession, None]:
    """Roll back and re-raise SQLAlchemy failures as CatalogError subclasses."""
    try:
        yield session
    except IntegrityError as e:
        await session.rollback()
        logger.error(f"DB integrity error during {operation}: {e.orig}")
        raise ConstraintViolationError(
            f"{operation} violates a storage constraint",
        )
    except (OperationalError, InterfaceError) as e:
        await session.rollback()
        logger.error(f"DB connection error during {operation}: {e}")
        raise DatabaseConnectionError(operation)
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise DatabaseError("Database driver error", operation)
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Owns the async engine (and its pool) plus the session factory."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        # SQLite uses a single-file or in-memory pool; sizing arguments don't apply
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "request",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback and error translation."""
        session = self._session_factory()
        try:
            async with translate_db_errors(session, operation):
                yield session
        finally:
            await session.close()

    async def ping(self) -> None:
        """Run SELECT 1 on the pool; raise DatabaseConnectionError if it fails."""
        try:
            async with self.session("readiness check") as db:
                await db.execute(text("SELECT 1"))
        except DatabaseConnectionError:
            raise
        except (DatabaseError, OSError) as e:
            logger.error(f"DB ping failed: {e}")
            raise DatabaseConnectionError("readiness check") from e

    async def close(self) -> None:
        await self.engine.dispose()


# Process-wide pool; lifecycle owned by init_db/close_db (called from the app lifespan)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


def get_db_manager() -> DatabaseSessionManager | None:
    """Current manager, read at call time (a from-import would freeze it at None)."""
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
