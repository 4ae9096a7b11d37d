"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure imports only core/errors from the domain side
    - All storage failures leave this layer as CatalogError subclasses

Design Decisions:
    - One module per concern: database.py (pool + error mapping), observability.py (logging)
"""
