"""Database Infrastructure - SQLAlchemy Base for the persisted documents.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for local runs and tests, asyncpg for PostgreSQL deployments
"""
