"""Document Store - SQL-backed persistence for per-owner JSON documents.

Invariants:
    - read() returns None for a missing document
    - write() replaces the whole document (last writer wins)
    - Every SQLAlchemy failure surfaces as PersistenceError (via DatabaseSessionManager)

Design Decisions:
    - One row per (owner, key) mirrors the browser-storage layout the documents come from
"""

import logging
from typing import Any

from slotboard.core.domain_types import StoredDocumentKey
from slotboard.core.errors import ErrorContext, PersistenceError
from slotboard.infrastructure.database import DatabaseSessionManager
from slotboard.models.stored_document import StoredDocument

logger = logging.getLogger(__name__)


class SqlDocumentStore:
    """DocumentStore implementation over the stored_documents table."""

    def __init__(self, manager: DatabaseSessionManager, owner: str):
        self._manager = manager
        self.owner = owner

    async def read(self, key: StoredDocumentKey) -> Any | None:
        try:
            async with self._manager.session() as db:
                doc = await db.get(StoredDocument, (self.owner, key.value))
                return None if doc is None else doc.payload
        except PersistenceError as e:
            e.context = ErrorContext(store_key=key.value)
            raise

    async def write(self, key: StoredDocumentKey, payload: Any) -> None:
        try:
            async with self._manager.session() as db:
                doc = await db.get(StoredDocument, (self.owner, key.value))
                if doc is None:
                    db.add(StoredDocument(
                        owner=self.owner, key=key.value, payload=payload,
                    ))
                else:
                    doc.payload = payload
                await db.commit()
        except PersistenceError as e:
            e.context = ErrorContext(store_key=key.value)
            raise
        logger.debug(
            f"Stored {key.value}",
            extra={"store_key": key.value, "owner": self.owner},
        )
