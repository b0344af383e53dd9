"""Infrastructure Layer - external sources, storage, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core domain logic (errors and types only)
    - Every external failure is mapped to a SlotBoardError subclass

Design Decisions:
    - Thin wrappers over httpx and SQLAlchemy keep error mapping in one place
"""
