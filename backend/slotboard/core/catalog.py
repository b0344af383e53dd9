"""Project Catalog - immutable snapshot of projects and their qualification slots.

Invariants:
    - 0 <= filled <= total and total >= 1 for every QualificationSlot (checked on construction)
    - Slot names are unique within a project
    - Project keys (stringified ids) are unique within a catalog
    - A catalog is never mutated: with_project/without_project return new snapshots

Design Decisions:
    - Frozen dataclasses + tuples: a snapshot handed to a renderer cannot change under it
    - Order is the document order; the ranker never reorders the catalog itself
    - Duplicate ids are resolved before construction by dedupe_projects (first one wins)
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from slotboard.core.domain_types import (
    MIN_SLOT_TOTAL, ProjectId, ProjectKey, project_key,
)
from slotboard.core.errors import ProjectNotFoundError


def clamp_filled(filled: int, total: int) -> int:
    """Clamp a fill counter into [0, total]."""
    return max(0, min(filled, total))


@dataclass(frozen=True)
class QualificationSlot:
    """A named, capacity-bounded slot within a project."""

    name: str
    filled: int
    total: int

    def __post_init__(self) -> None:
        if self.total < MIN_SLOT_TOTAL:
            raise ValueError(f"Slot '{self.name}' total must be >= {MIN_SLOT_TOTAL}")
        if not 0 <= self.filled <= self.total:
            raise ValueError(
                f"Slot '{self.name}' filled {self.filled} outside [0, {self.total}]",
            )

    @property
    def is_full(self) -> bool:
        return self.filled >= self.total

    def with_filled(self, filled: int) -> "QualificationSlot":
        return replace(self, filled=filled)


@dataclass(frozen=True)
class Project:
    """A project and its ordered qualification slots."""

    id: ProjectId
    name: str
    owner: str
    description: str = ""
    url: str = "#"
    tags: tuple[str, ...] = ()
    qualifications: tuple[QualificationSlot, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        names = [q.name for q in self.qualifications]
        if len(names) != len(set(names)):
            raise ValueError(f"Project '{self.id}' has duplicate qualification names")

    @property
    def key(self) -> ProjectKey:
        return project_key(self.id)

    @property
    def slot_names(self) -> frozenset[str]:
        return frozenset(q.name for q in self.qualifications)

    def with_slots(self, slots: Iterable[QualificationSlot]) -> "Project":
        return replace(self, qualifications=tuple(slots))


def dedupe_projects(
    projects: Iterable[Project],
) -> tuple[list[Project], list[ProjectKey]]:
    """Keep the first project for each key. Returns (kept, dropped keys)."""
    kept: list[Project] = []
    seen: set[ProjectKey] = set()
    dropped: list[ProjectKey] = []
    for project in projects:
        if project.key in seen:
            dropped.append(project.key)
            continue
        seen.add(project.key)
        kept.append(project)
    return kept, dropped


class ProjectCatalog:
    """Ordered, immutable collection of projects indexed by project key."""

    def __init__(self, projects: Iterable[Project] = ()):
        ordered = tuple(projects)
        index: dict[ProjectKey, int] = {}
        for position, project in enumerate(ordered):
            if project.key in index:
                raise ValueError(f"Duplicate project id '{project.key}'")
            index[project.key] = position
        self._projects = ordered
        self._index = index

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)

    def __contains__(self, project_id: object) -> bool:
        return project_key(project_id) in self._index  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectCatalog):
            return NotImplemented
        return self._projects == other._projects

    def __repr__(self) -> str:
        return f"ProjectCatalog({len(self._projects)} projects)"

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    @property
    def keys(self) -> frozenset[ProjectKey]:
        return frozenset(self._index)

    def get(self, project_id: ProjectId) -> Project | None:
        position = self._index.get(project_key(project_id))
        return None if position is None else self._projects[position]

    def require(self, project_id: ProjectId) -> Project:
        """Get a project or raise ProjectNotFoundError."""
        project = self.get(project_id)
        if project is None:
            raise ProjectNotFoundError(str(project_id))
        return project

    def limited(self, max_cards: int | None) -> tuple[Project, ...]:
        """First max_cards projects (None = all)."""
        if max_cards is None:
            return self._projects
        return self._projects[:max_cards]

    def with_project(self, project: Project) -> "ProjectCatalog":
        """Replace the project with the same key in place, or append it."""
        position = self._index.get(project.key)
        if position is None:
            return ProjectCatalog((*self._projects, project))
        projects = list(self._projects)
        projects[position] = project
        return ProjectCatalog(projects)

    def without_project(self, project_id: ProjectId) -> "ProjectCatalog":
        key = project_key(project_id)
        return ProjectCatalog(p for p in self._projects if p.key != key)

    def next_project_id(self, reserved_keys: Iterable[str] = ()) -> int:
        """max(integer ids) + 1; string ids are ignored.

        reserved_keys are keys still in use outside the catalog (orphaned
        ledger records); digit-only keys among them are never reissued.
        """
        numeric = [
            p.id for p in self._projects
            if isinstance(p.id, int) and not isinstance(p.id, bool)
        ]
        numeric.extend(int(k) for k in reserved_keys if k.isdigit())
        return max(numeric, default=0) + 1
