"""ORM Models - SQLAlchemy declarative models for persisted documents.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from slotboard.models.stored_document import StoredDocument  # noqa: F401
