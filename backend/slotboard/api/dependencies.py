"""API Dependencies - hand the per-process SlotBoard and its persistence to routes.

Invariants:
    - The board lives on app.state, never in a module global
    - If the catalog failed to load, every board-backed route answers with that LoadError

Design Decisions:
    - Dependencies read request.app.state so tests install their own board per client
"""

from fastapi import Request

from slotboard.core.errors import LoadError
from slotboard.core.slot_board import SlotBoard
from slotboard.services.board_persistence import BoardPersistence


def get_board(request: Request) -> SlotBoard:
    board = getattr(request.app.state, "board", None)
    if board is None:
        error = getattr(request.app.state, "load_error", None)
        raise error or LoadError("catalog not loaded yet", "unknown")
    return board


def get_persistence(request: Request) -> BoardPersistence:
    return request.app.state.persistence
