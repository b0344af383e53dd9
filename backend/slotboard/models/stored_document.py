"""Stored Document ORM - one JSON document per (owner, key).

Invariants:
    - (owner, key) is the primary key: one ledger, one counter cache and one
      owned-projects document per owner
    - payload holds the document exactly as the core serialized it

Design Decisions:
    - JSON column instead of normalized tables: the ledger and counter cache are
      whole-document reads and writes, and last writer wins
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from slotboard.db.base import Base


class StoredDocument(Base):
    """A persisted per-owner document."""
    __tablename__ = "stored_documents"

    owner: Mapped[str] = mapped_column(String(100), primary_key=True)
    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    payload: Mapped[Any] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
