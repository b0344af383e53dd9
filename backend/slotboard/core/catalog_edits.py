"""Catalog Edits - create, edit and remove user-owned projects.

Invariants:
    - All functions are PURE: they return new catalogs, inputs untouched
    - New projects get id max(integer ids, reserved ledger keys) + 1 and start
      with filled = 0, so an orphaned ledger record never attaches to them
    - Editing keeps filled for surviving slot names (clamped to the new total);
      new slot names start at 0
    - Removing a project never touches the ledger (its records become orphans)

Design Decisions:
    - Drafts are validated at the API boundary (schemas/projects.py); here they
      are trusted, and QualificationSlot still guards the counter invariant
    - The board applies drafts to the baseline and rebuilds the live project
      from the ledger (slot_board.py), so recompute() keeps agreeing with it
"""

from dataclasses import dataclass
from typing import Iterable

from slotboard.core.catalog import (
    Project, ProjectCatalog, QualificationSlot, clamp_filled,
)
from slotboard.core.domain_types import DEFAULT_PROJECT_URL, ProjectId


@dataclass(frozen=True)
class ProjectDraft:
    """User-entered project fields, already validated."""

    name: str
    owner: str
    description: str = ""
    url: str = DEFAULT_PROJECT_URL
    tags: tuple[str, ...] = ()
    qualifications: tuple[tuple[str, int], ...] = ()  # (name, total)


def merge_slots(
    previous: tuple[QualificationSlot, ...],
    entries: tuple[tuple[str, int], ...],
) -> tuple[QualificationSlot, ...]:
    """Build slots from (name, total) entries, carrying filled for known names."""
    filled_by_name = {q.name: q.filled for q in previous}
    return tuple(
        QualificationSlot(
            name=name, filled=clamp_filled(filled_by_name.get(name, 0), total),
            total=total,
        )
        for name, total in entries
    )


def project_from_draft(
    project_id: ProjectId, draft: ProjectDraft,
    previous: Project | None = None,
) -> Project:
    slots = previous.qualifications if previous else ()
    return Project(
        id=project_id,
        name=draft.name,
        owner=draft.owner,
        description=draft.description,
        url=draft.url or DEFAULT_PROJECT_URL,
        tags=draft.tags,
        qualifications=merge_slots(slots, draft.qualifications),
    )


def create_project(
    catalog: ProjectCatalog, draft: ProjectDraft,
    reserved_keys: Iterable[str] = (),
) -> tuple[ProjectCatalog, Project]:
    """Append a new project with an id no catalog project or ledger record uses."""
    project = project_from_draft(catalog.next_project_id(reserved_keys), draft)
    return catalog.with_project(project), project


def edit_project(
    catalog: ProjectCatalog, project_id: ProjectId, draft: ProjectDraft,
) -> tuple[ProjectCatalog, Project]:
    """Replace an existing project's fields. Raises ProjectNotFoundError."""
    previous = catalog.require(project_id)
    project = project_from_draft(previous.id, draft, previous)
    return catalog.with_project(project), project


def remove_project(
    catalog: ProjectCatalog, project_id: ProjectId,
) -> ProjectCatalog:
    """Drop a project. Raises ProjectNotFoundError."""
    catalog.require(project_id)
    return catalog.without_project(project_id)
