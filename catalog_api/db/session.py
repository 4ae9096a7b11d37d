"""Standalone Sessions — short-lived async sessions for code outside FastAPI.

Invariants:
    - Each standalone_session() owns its engine and disposes it on exit
    - Errors are translated exactly like request sessions

Design Decisions:
    - Separate from infrastructure/database.py: the CLI runs without the app lifespan,
      so it can't rely on the process-wide db_manager
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from catalog_api.infrastructure.database import translate_db_errors


@asynccontextmanager
async def standalone_session(
    database_url: str, operation: str = "script",
) -> AsyncGenerator[AsyncSession, None]:
    """Open one session on a private engine for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    try:
        async with factory() as session:
            async with translate_db_errors(session, operation):
                yield session
    finally:
        await engine.dispose()
