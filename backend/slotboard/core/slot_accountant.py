"""Slot Accountant - reconciles a claim-set transition into slot fill counters.

Invariants:
    - All functions are PURE: no IO, no async, no DB, inputs never mutated
    - filled never leaves [0, total]
    - Unclaimed -> Claimed requires filled < total and increments filled
    - Claimed -> Unclaimed always succeeds and decrements filled (floor 0)
    - Re-requesting the current state is a no-op
    - reconcile is idempotent: reconcile(result.slots, result.effective_claims, requested)
      changes nothing
    - A claim on a full slot is rejected: absent from effective_claims, listed in
      rejected, never raised
    - Requested names that match no slot are dropped from effective_claims

Design Decisions:
    - One transition function per slot; reconcile folds it over the project's slots
    - recompute rebuilds counters from (baseline, ledger) by reconciling each
      ledger record from the empty claim set; the counter cache is never consulted
"""

from dataclasses import dataclass, field
from typing import Iterable

from slotboard.core.application_ledger import ApplicationLedger
from slotboard.core.catalog import ProjectCatalog, QualificationSlot
from slotboard.core.domain_types import ClaimState, ProjectKey


@dataclass(frozen=True)
class ReconcileResult:
    """Updated slots plus the claim set actually accepted."""

    slots: tuple[QualificationSlot, ...]
    effective_claims: frozenset[str]
    rejected: frozenset[str] = frozenset()


@dataclass(frozen=True)
class RecomputeResult:
    """Catalog with rebuilt counters and the ledger trimmed to what fits."""

    catalog: ProjectCatalog
    ledger: ApplicationLedger
    dropped: dict[ProjectKey, frozenset[str]] = field(default_factory=dict)


def transition(
    slot: QualificationSlot, current: ClaimState, requested: ClaimState,
) -> tuple[QualificationSlot, ClaimState]:
    """Apply one per-slot state transition. Returns (slot, resulting state)."""
    if current == requested:
        return slot, current
    if requested == ClaimState.CLAIMED:
        if slot.filled < slot.total:
            return slot.with_filled(slot.filled + 1), ClaimState.CLAIMED
        return slot, ClaimState.UNCLAIMED
    if slot.filled > 0:
        return slot.with_filled(slot.filled - 1), ClaimState.UNCLAIMED
    return slot, ClaimState.UNCLAIMED


def _state(name: str, claims: frozenset[str]) -> ClaimState:
    return ClaimState.CLAIMED if name in claims else ClaimState.UNCLAIMED


def reconcile(
    slots: Iterable[QualificationSlot],
    previous_claims: Iterable[str],
    requested_claims: Iterable[str],
) -> ReconcileResult:
    """Compute updated slots and the effective claim set. Pure, no IO."""
    previous = frozenset(previous_claims)
    requested = frozenset(requested_claims)
    updated: list[QualificationSlot] = []
    effective: set[str] = set()
    rejected: set[str] = set()

    for slot in slots:
        wanted = _state(slot.name, requested)
        new_slot, state = transition(slot, _state(slot.name, previous), wanted)
        if state == ClaimState.CLAIMED:
            effective.add(slot.name)
        elif wanted == ClaimState.CLAIMED:
            rejected.add(slot.name)
        updated.append(new_slot)

    return ReconcileResult(
        slots=tuple(updated),
        effective_claims=frozenset(effective),
        rejected=frozenset(rejected),
    )


def recompute(
    baseline: ProjectCatalog, ledger: ApplicationLedger,
) -> RecomputeResult:
    """Rebuild fill counters from the baseline catalog and the ledger. Pure.

    Orphaned ledger records are left untouched. Claims that no longer fit
    (slot full at baseline, or slot renamed away) are removed from the
    returned ledger and reported in dropped.
    """
    catalog = baseline
    repaired = ledger.copy()
    dropped: dict[ProjectKey, frozenset[str]] = {}

    for project in baseline:
        if not ledger.has_record(project.key):
            continue
        claims = ledger.get(project.key)
        result = reconcile(project.qualifications, frozenset(), claims)
        catalog = catalog.with_project(project.with_slots(result.slots))
        lost = claims - result.effective_claims
        if lost:
            dropped[project.key] = lost
            repaired.set(project.key, result.effective_claims)

    return RecomputeResult(catalog=catalog, ledger=repaired, dropped=dropped)
