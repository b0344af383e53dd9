"""Core Layer - pure slot accounting, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Snapshots are immutable; every change produces a new snapshot

Design Decisions:
    - Functional core separated from imperative shell (services/ owns IO)
"""
