"""Slot Views - read-only projections handed to rendering collaborators.

Invariants:
    - Pure: reads snapshots, never mutates slot state
    - Slot views are always ranked (see ranking.py)
    - Returns plain JSON-safe dicts

Design Decisions:
    - Renderers consume these dicts; nothing downstream touches QualificationSlot
"""

from typing import Iterable

from slotboard.core.catalog import Project, QualificationSlot
from slotboard.core.ranking import rank, slot_priority


def slot_view(slot: QualificationSlot, claimed: frozenset[str]) -> dict:
    return {
        "name": slot.name,
        "filled": slot.filled,
        "total": slot.total,
        "is_full": slot.is_full,
        "is_claimed": slot.name in claimed,
        "priority": int(slot_priority(slot, claimed)),
    }


def sorted_slot_views(
    slots: Iterable[QualificationSlot], claimed: Iterable[str],
) -> list[dict]:
    """Ranked slot views for one project."""
    claimed_set = frozenset(claimed)
    return [slot_view(s, claimed_set) for s in rank(slots, claimed_set)]


def claim_state_view(claimed: Iterable[str]) -> dict:
    names = sorted(set(claimed))
    return {"claimed_names": names, "has_any_claim": bool(names)}


def project_view(project: Project, claimed: Iterable[str]) -> dict:
    """Card/details projection of a project with ranked slots."""
    claimed_set = frozenset(claimed)
    return {
        "id": project.id,
        "name": project.name,
        "owner": project.owner,
        "description": project.description,
        "url": project.url,
        "tags": list(project.tags),
        "slots": sorted_slot_views(project.qualifications, claimed_set),
        "claim_state": claim_state_view(claimed_set),
    }
