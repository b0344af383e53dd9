"""Claim Schemas - request and response models for the claim endpoints.

Invariants:
    - ClaimRequest.names: stripped, blanks dropped, duplicates collapsed
    - An empty names list is valid (releases every claim on the project)
    - Slot lists in responses are always ranked

Design Decisions:
    - Rejected names travel in the response; a full slot is never an HTTP error
"""

from pydantic import BaseModel, Field, field_validator


class ClaimRequest(BaseModel):
    """Requested claim set for one project."""
    names: list[str] = Field(default_factory=list, max_length=200)

    @field_validator("names")
    @classmethod
    def normalize_names(cls, v: list[str]) -> list[str]:
        cleaned: list[str] = []
        for name in v:
            name = name.strip()
            if name and name not in cleaned:
                cleaned.append(name)
        return cleaned


class SlotView(BaseModel):
    name: str
    filled: int
    total: int
    is_full: bool
    is_claimed: bool
    priority: int


class ClaimStateResponse(BaseModel):
    claimed_names: list[str]
    has_any_claim: bool


class ClaimResultResponse(BaseModel):
    """Outcome of a submitted claim set."""
    project_id: str
    slots: list[SlotView]
    effective_claims: list[str]
    rejected: list[str]
    persisted: bool


class ProjectView(BaseModel):
    id: int | str
    name: str
    owner: str
    description: str
    url: str
    tags: list[str]
    slots: list[SlotView]
    claim_state: ClaimStateResponse


class ProjectListResponse(BaseModel):
    projects: list[ProjectView]
    shown: int
    total: int


class OwnedProjectListResponse(BaseModel):
    projects: list[ProjectView]
