"""Services Layer — one service class per table, constructed per request with a session.

Invariants:
    - Services never build HTTP responses; they return ORM rows or schemas and raise CatalogError
    - Every write wrapped in translate_db_errors

Design Decisions:
    - Classes holding the session over free functions: routes construct one per request
      via Depends, tests construct them directly on a test session
"""
