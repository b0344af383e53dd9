"""Pydantic Schemas - request/response validation for API endpoints and input documents.

Invariants:
    - Schemas validate at system boundary (catalog document, user input, API responses)
    - Malformed records are rejected here, never downstream in accounting logic

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
