"""Core Layer — pure domain logic: errors, domain types, credential primitives.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO and no async

Design Decisions:
    - Functional core separated from imperative shell: security.py takes secrets as
      arguments instead of reading settings
"""
