"""My Projects Routes - create, edit and delete projects owned by the current user.

Invariants:
    - Only owned projects can be edited or deleted; anything else is 404
    - New projects start with every slot at filled = 0
    - Deleting a project leaves its ledger record in place (orphaned)
    - Owned projects are persisted before the counter cache

Design Decisions:
    - The board applies each edit to both the live catalog and the baseline
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from slotboard.api.dependencies import get_board, get_persistence
from slotboard.core.slot_board import SlotBoard
from slotboard.schemas.claims import OwnedProjectListResponse, ProjectView
from slotboard.schemas.projects import ProjectDraftRequest
from slotboard.services.board_persistence import BoardPersistence

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/my-projects", tags=["my-projects"])


@router.get("", response_model=OwnedProjectListResponse)
async def list_my_projects(board: SlotBoard = Depends(get_board)):
    """Owned projects, live counters."""
    return {
        "projects": [
            board.project_details(p.id) for p in board.owned_projects()
        ],
    }


@router.post(
    "", response_model=ProjectView, status_code=status.HTTP_201_CREATED,
)
async def create_my_project(
    body: ProjectDraftRequest,
    board: SlotBoard = Depends(get_board),
    persistence: BoardPersistence = Depends(get_persistence),
):
    project = board.create_project(body.to_draft())
    await persistence.save_catalog_edit(board)
    logger.info("Project created", extra={"project_id": project.key})
    return board.project_details(project.id)


@router.put("/{project_id}", response_model=ProjectView)
async def edit_my_project(
    project_id: str,
    body: ProjectDraftRequest,
    board: SlotBoard = Depends(get_board),
    persistence: BoardPersistence = Depends(get_persistence),
):
    project = board.edit_project(project_id, body.to_draft())
    await persistence.save_catalog_edit(board)
    return board.project_details(project.id)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_my_project(
    project_id: str,
    board: SlotBoard = Depends(get_board),
    persistence: BoardPersistence = Depends(get_persistence),
):
    board.remove_project(project_id)
    await persistence.save_catalog_edit(board)
    logger.info("Project deleted", extra={"project_id": project_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
