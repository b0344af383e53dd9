"""Services Layer - IO orchestration around the pure slot-accounting core.

Invariants:
    - Services call core functions and persist their results; no accounting logic here
    - Persistence failures are logged and reported, never raised to the caller

Design Decisions:
    - Loader and persistence split by lifecycle: startup vs. per-request writes
"""
