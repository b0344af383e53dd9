"""Application Routes - the user's ledger, including orphaned records.

Invariants:
    - GET lists every ledger record, orphans included
    - POST /prune drops only records whose project left the catalog

Design Decisions:
    - Pruning is explicit; orphans are otherwise kept and ignored
"""

import logging

from fastapi import APIRouter, Depends

from slotboard.api.dependencies import get_board, get_persistence
from slotboard.core.slot_board import SlotBoard
from slotboard.services.board_persistence import BoardPersistence

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/applications", tags=["applications"])


@router.get("")
async def list_applications(board: SlotBoard = Depends(get_board)):
    return {
        "applications": board.ledger.to_document(),
        "orphaned": sorted(board.orphaned_keys),
    }


@router.post("/prune")
async def prune_applications(
    board: SlotBoard = Depends(get_board),
    persistence: BoardPersistence = Depends(get_persistence),
):
    pruned = board.prune_orphans()
    persisted = await persistence.save_ledger(board) if pruned else True
    if pruned:
        logger.info("Pruned orphaned ledger records", extra={"count": len(pruned)})
    return {"pruned": sorted(pruned), "persisted": persisted}
