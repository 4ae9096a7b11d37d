"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - One module per resource; every route declares its request and response model

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
