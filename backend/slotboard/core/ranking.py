"""Qualification Ranker - deterministic display order for a project's slots.

Invariants:
    - Pure and re-invocable: same (slots, claimed) always yields the same order
    - Stable: ties keep their original relative order
    - Buckets, lowest first: available (0), claimed and not full (1), full (2)
    - Nothing but the bucket affects ordering

Design Decisions:
    - sorted() is stable, so a bucket key is the whole algorithm
"""

from typing import Iterable

from slotboard.core.catalog import QualificationSlot
from slotboard.core.domain_types import SlotPriority


def slot_priority(slot: QualificationSlot, claimed: frozenset[str]) -> SlotPriority:
    if slot.is_full:
        return SlotPriority.FULL
    if slot.name in claimed:
        return SlotPriority.CLAIMED
    return SlotPriority.AVAILABLE


def rank(
    slots: Iterable[QualificationSlot], claimed: Iterable[str],
) -> tuple[QualificationSlot, ...]:
    """Sort slots by display priority."""
    claimed_set = frozenset(claimed)
    return tuple(sorted(slots, key=lambda s: slot_priority(s, claimed_set)))
