"""Project Draft Schemas - validation for catalog-management requests.

Invariants:
    - name and owner: stripped, non-empty
    - At least one qualification; each has a non-blank name and total >= 1
    - Qualification names unique within the draft
    - tags accept a list or a comma-separated string; trimmed, blanks dropped
    - A blank url becomes "#"

Design Decisions:
    - to_draft() hands the core a frozen ProjectDraft, so core code never sees pydantic
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from slotboard.core.catalog_edits import ProjectDraft
from slotboard.core.domain_types import DEFAULT_PROJECT_URL


class QualificationDraft(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    total: int = Field(ge=1, le=10_000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("qualification name cannot be empty or whitespace")
        return v


class ProjectDraftRequest(BaseModel):
    """Create/edit body for an owned project."""
    name: str = Field(min_length=1, max_length=200)
    owner: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=10_000)
    url: str = Field("", max_length=2_000)
    tags: list[str] = Field(default_factory=list)
    qualifications: list[QualificationDraft] = Field(min_length=1)

    @field_validator("name", "owner")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v

    @field_validator("description", "url")
    @classmethod
    def strip_optional(cls, v: str) -> str:
        return v.strip()

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return [t.strip() for t in v if isinstance(t, str) and t.strip()]
        return v

    @model_validator(mode="after")
    def unique_qualification_names(self) -> "ProjectDraftRequest":
        names = [q.name for q in self.qualifications]
        if len(names) != len(set(names)):
            raise ValueError("qualification names must be unique")
        return self

    def to_draft(self) -> ProjectDraft:
        return ProjectDraft(
            name=self.name,
            owner=self.owner,
            description=self.description,
            url=self.url or DEFAULT_PROJECT_URL,
            tags=tuple(self.tags),
            qualifications=tuple((q.name, q.total) for q in self.qualifications),
        )
