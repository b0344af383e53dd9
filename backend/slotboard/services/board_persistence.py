"""Board Persistence - writes the board's documents in the required order.

Invariants:
    - Ledger is written before the counter cache; if the ledger write fails the
      counter cache is not written
    - A failed write is logged and reported as False, never raised: accounting
      continues in memory and the change may be lost on reload
    - Only effective claim sets reach the ledger (the board holds nothing else)

Design Decisions:
    - No cross-store transaction: the counter cache is a rebuildable mirror,
      repaired by recompute() on the next startup
"""

import logging
from typing import Any

from slotboard.core.catalog_snapshot import projects_to_snapshot
from slotboard.core.domain_types import StoredDocumentKey
from slotboard.core.errors import PersistenceError
from slotboard.core.repository_protocols import DocumentStore
from slotboard.core.slot_board import SlotBoard

logger = logging.getLogger(__name__)


class BoardPersistence:
    """Persists ledger, counter cache and owned projects for one board."""

    def __init__(self, store: DocumentStore):
        self._store = store

    async def save_claims(self, board: SlotBoard) -> bool:
        """Persist after a claim change: ledger first, then counters."""
        if not await self.save_ledger(board):
            return False
        return await self.save_counters(board)

    async def save_catalog_edit(self, board: SlotBoard) -> bool:
        """Persist after a catalog-management change.

        Edits can trim the ledger, so it goes out with the owned projects.
        """
        owned_ok = await self._write(
            StoredDocumentKey.OWNED_PROJECTS,
            projects_to_snapshot(board.owned_projects()),
        )
        return await self.save_claims(board) and owned_ok

    async def save_ledger(self, board: SlotBoard) -> bool:
        return await self._write(
            StoredDocumentKey.LEDGER, board.ledger.to_document(),
        )

    async def save_counters(self, board: SlotBoard) -> bool:
        return await self._write(
            StoredDocumentKey.COUNTER_CACHE, projects_to_snapshot(board.catalog),
        )

    async def _write(self, key: StoredDocumentKey, payload: Any) -> bool:
        try:
            await self._store.write(key, payload)
            return True
        except PersistenceError as e:
            logger.error(
                f"Persisting {key.value} failed, keeping change in memory: {e.message}",
                extra={"error_code": e.code, "store_key": key.value},
            )
            return False
