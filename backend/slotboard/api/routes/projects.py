"""Project Routes - catalog listing and the claim surface for rendering collaborators.

Invariants:
    - Slot lists are always ranked (available, claimed, full)
    - PUT claims runs one reconcile on the board, then persists ledger before counters
    - A claim on a full slot is reported in `rejected`, never as an HTTP error
    - A persistence failure still returns 200 with persisted=false

Design Decisions:
    - PUT with the full requested set (not add/remove deltas): the board
      computes the transition against the ledger, so repeats are no-ops
"""

import logging

from fastapi import APIRouter, Depends

from slotboard.api.dependencies import get_board, get_persistence
from slotboard.config import Settings, get_settings
from slotboard.core.slot_board import SlotBoard
from slotboard.schemas.claims import (
    ClaimRequest, ClaimResultResponse, ClaimStateResponse,
    ProjectListResponse, ProjectView, SlotView,
)
from slotboard.services.board_persistence import BoardPersistence

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    board: SlotBoard = Depends(get_board),
    settings: Settings = Depends(get_settings),
):
    """Projects of the current catalog, limited by max_cards."""
    return board.render_projects(settings.max_cards)


@router.get("/{project_id}", response_model=ProjectView)
async def get_project(project_id: str, board: SlotBoard = Depends(get_board)):
    """Project details with ranked slots and claim state."""
    return board.project_details(project_id)


@router.get("/{project_id}/slots", response_model=list[SlotView])
async def get_sorted_slots(
    project_id: str, board: SlotBoard = Depends(get_board),
):
    return board.get_sorted_slots(project_id)


@router.get("/{project_id}/claims", response_model=ClaimStateResponse)
async def get_claim_state(
    project_id: str, board: SlotBoard = Depends(get_board),
):
    board.catalog.require(project_id)
    return board.get_claim_state(project_id)


@router.put("/{project_id}/claims", response_model=ClaimResultResponse)
async def submit_claim(
    project_id: str,
    body: ClaimRequest,
    board: SlotBoard = Depends(get_board),
    persistence: BoardPersistence = Depends(get_persistence),
):
    """Replace the user's claim set for a project."""
    outcome = board.submit_claim(project_id, body.names)
    for name in sorted(outcome.rejected):
        logger.info(
            "Claim rejected, slot at capacity",
            extra={"project_id": outcome.project_key, "slot_name": name},
        )
    persisted = await persistence.save_claims(board)
    return ClaimResultResponse(
        project_id=outcome.project_key,
        slots=board.get_sorted_slots(project_id),
        effective_claims=sorted(outcome.effective_claims),
        rejected=sorted(outcome.rejected),
        persisted=persisted,
    )
