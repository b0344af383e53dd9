"""Catalog Schemas - validated records for the external catalog document.

Invariants:
    - id is required and kept as given (int stays int, str stays str)
    - qualification total >= 1 and names non-blank and unique per project
    - filled outside [0, total] is accepted here and clamped by to_project()
    - to_project() reports every clamp as an INVARIANT_VIOLATION entry

Design Decisions:
    - TypeAdapter over a wrapper model: the document root is a bare list
    - Clamping returns violations instead of logging; the loader owns logging
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from slotboard.core.catalog import Project, QualificationSlot, clamp_filled
from slotboard.core.domain_types import DEFAULT_PROJECT_URL


class QualificationRecord(BaseModel):
    """One {name, filled, total} entry of a project record."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=200)
    filled: int = 0
    total: int = Field(ge=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("qualification name cannot be blank")
        return v


class ProjectRecord(BaseModel):
    """One project record of the catalog document."""
    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str
    owner: str = ""
    description: str = ""
    url: str = DEFAULT_PROJECT_URL
    tags: list[str] = Field(default_factory=list)
    qualifications: list[QualificationRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def unique_qualification_names(self) -> "ProjectRecord":
        names = [q.name for q in self.qualifications]
        if len(names) != len(set(names)):
            raise ValueError(f"project {self.id!r} has duplicate qualification names")
        return self

    def to_project(self) -> tuple[Project, list[dict]]:
        """Convert to a core Project, clamping counters. Returns (project, violations)."""
        violations: list[dict] = []
        slots = []
        for q in self.qualifications:
            filled = clamp_filled(q.filled, q.total)
            if filled != q.filled:
                violations.append({
                    "error_code": "INVARIANT_VIOLATION",
                    "project_id": str(self.id),
                    "slot_name": q.name,
                    "filled": q.filled,
                    "total": q.total,
                })
            slots.append(QualificationSlot(name=q.name, filled=filled, total=q.total))
        project = Project(
            id=self.id,
            name=self.name,
            owner=self.owner,
            description=self.description,
            url=self.url or DEFAULT_PROJECT_URL,
            tags=tuple(self.tags),
            qualifications=tuple(slots),
        )
        return project, violations


_CATALOG_ADAPTER = TypeAdapter(list[ProjectRecord])


def parse_catalog_records(data: Any) -> list[ProjectRecord]:
    """Validate a catalog document. Raises pydantic.ValidationError."""
    return _CATALOG_ADAPTER.validate_python(data)
