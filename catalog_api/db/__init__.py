"""Database Infrastructure — declarative Base and standalone session helpers.

Invariants:
    - All sessions are async (AsyncSession)
    - The request-path pool lives in infrastructure/database.py, not here

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""
