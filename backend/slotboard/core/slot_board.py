"""Slot Board - per-session context owning the catalog and the application ledger.

Invariants:
    - Pure in-memory state: no IO, no async (persistence lives in services/)
    - Live fill counters change only through reconcile() (submit_claim, edit_project)
    - The ledger only ever receives the effective claim set, never raw input
    - Every operation computes fresh snapshots and swaps them in at the end;
      a failure midway leaves the previous snapshots in place
    - Orphaned ledger records stay readable via ledger.get() and never render

Design Decisions:
    - Explicit context object instead of module globals: tests and concurrent
      sessions each get an isolated board
    - baseline holds counters without this user's claims; catalog is the live view
    - Catalog-management edits only apply to owned projects
    - An edited project is rebuilt as reconcile(baseline slots, {}, ledger claims),
      the same rule recompute() uses at startup
"""

from dataclasses import dataclass
from typing import Iterable

from slotboard.core.application_ledger import ApplicationLedger
from slotboard.core.catalog import Project, ProjectCatalog, QualificationSlot
from slotboard.core.catalog_edits import (
    ProjectDraft, create_project, edit_project, remove_project,
)
from slotboard.core.domain_types import ProjectId, ProjectKey, project_key
from slotboard.core.errors import ProjectNotFoundError
from slotboard.core.slot_accountant import RecomputeResult, reconcile, recompute
from slotboard.core.slot_views import (
    claim_state_view, project_view, sorted_slot_views,
)


@dataclass(frozen=True)
class ClaimOutcome:
    """Result of one submit_claim call."""

    project_key: ProjectKey
    slots: tuple[QualificationSlot, ...]
    effective_claims: frozenset[str]
    rejected: frozenset[str]


class SlotBoard:
    """Catalog + ledger for one user, with the UI-facing operations."""

    def __init__(
        self,
        baseline: ProjectCatalog,
        catalog: ProjectCatalog | None = None,
        ledger: ApplicationLedger | None = None,
        owned_keys: Iterable[ProjectKey] = (),
    ):
        self._baseline = baseline
        self._catalog = catalog if catalog is not None else baseline
        self._ledger = ledger if ledger is not None else ApplicationLedger()
        self._owned = frozenset(owned_keys)

    @classmethod
    def from_baseline(
        cls,
        baseline: ProjectCatalog,
        ledger: ApplicationLedger,
        owned_keys: Iterable[ProjectKey] = (),
    ) -> tuple["SlotBoard", RecomputeResult]:
        """Build a board whose counters are recomputed from the ledger."""
        result = recompute(baseline, ledger)
        board = cls(baseline, result.catalog, result.ledger, owned_keys)
        return board, result

    # ─── Snapshots ──────────────────────────────────────────────

    @property
    def baseline(self) -> ProjectCatalog:
        return self._baseline

    @property
    def catalog(self) -> ProjectCatalog:
        return self._catalog

    @property
    def ledger(self) -> ApplicationLedger:
        return self._ledger

    @property
    def owned_keys(self) -> frozenset[ProjectKey]:
        return self._owned

    @property
    def orphaned_keys(self) -> frozenset[ProjectKey]:
        return self._ledger.orphaned(self._catalog.keys)

    # ─── UI surface ─────────────────────────────────────────────

    def get_sorted_slots(self, project_id: ProjectId) -> list[dict]:
        project = self._catalog.require(project_id)
        return sorted_slot_views(
            project.qualifications, self._ledger.get(project.key),
        )

    def get_claim_state(self, project_id: ProjectId) -> dict:
        return claim_state_view(self._ledger.get(project_id))

    def submit_claim(
        self, project_id: ProjectId, requested_names: Iterable[str],
    ) -> ClaimOutcome:
        """Reconcile the requested claim set and swap in the new snapshots."""
        project = self._catalog.require(project_id)
        result = reconcile(
            project.qualifications,
            self._ledger.get(project.key),
            requested_names,
        )
        catalog = self._catalog.with_project(project.with_slots(result.slots))
        ledger = self._ledger.copy()
        ledger.set(project.key, result.effective_claims)

        self._catalog, self._ledger = catalog, ledger
        return ClaimOutcome(
            project_key=project.key,
            slots=result.slots,
            effective_claims=result.effective_claims,
            rejected=result.rejected,
        )

    def render_projects(self, max_cards: int | None = None) -> dict:
        shown = self._catalog.limited(max_cards)
        return {
            "projects": [
                project_view(p, self._ledger.get(p.key)) for p in shown
            ],
            "shown": len(shown),
            "total": len(self._catalog),
        }

    def project_details(self, project_id: ProjectId) -> dict:
        project = self._catalog.require(project_id)
        return project_view(project, self._ledger.get(project.key))

    def prune_orphans(self) -> frozenset[ProjectKey]:
        """Drop ledger records whose project left the catalog."""
        orphans = self.orphaned_keys
        if orphans:
            self._ledger = self._ledger.pruned(self._catalog.keys)
        return orphans

    # ─── Catalog management (owned projects) ────────────────────

    def owned_projects(self) -> tuple[Project, ...]:
        """Baseline versions of owned projects, in catalog order."""
        return tuple(p for p in self._baseline if p.key in self._owned)

    def create_project(self, draft: ProjectDraft) -> Project:
        catalog, project = create_project(
            self._catalog, draft, reserved_keys=self._ledger.project_keys,
        )
        baseline = self._baseline.with_project(project)
        self._catalog, self._baseline = catalog, baseline
        self._owned = self._owned | {project.key}
        return project

    def edit_project(self, project_id: ProjectId, draft: ProjectDraft) -> Project:
        """Apply a draft to the baseline and re-apply this user's claims on top.

        Claims on slots the draft removes, or that no longer fit, are dropped
        from the ledger record.
        """
        self._require_owned(project_id)
        baseline, edited = edit_project(self._baseline, project_id, draft)
        ledger = self._ledger.copy()
        result = reconcile(edited.qualifications, frozenset(), ledger.get(edited.key))
        if ledger.has_record(edited.key):
            ledger.set(edited.key, result.effective_claims)
        project = edited.with_slots(result.slots)
        catalog = self._catalog.with_project(project)

        self._catalog, self._baseline, self._ledger = catalog, baseline, ledger
        return project

    def remove_project(self, project_id: ProjectId) -> None:
        self._require_owned(project_id)
        catalog = remove_project(self._catalog, project_id)
        baseline = remove_project(self._baseline, project_id)
        self._catalog, self._baseline = catalog, baseline
        self._owned = self._owned - {project_key(project_id)}

    def _require_owned(self, project_id: ProjectId) -> None:
        if project_key(project_id) not in self._owned:
            raise ProjectNotFoundError(str(project_id))
