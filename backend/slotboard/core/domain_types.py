"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ProjectKey is the stringified project id; every map keyed by project uses it
    - SlotPriority values are the display buckets, lowest first
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str/int Enums serialize to JSON without custom encoders
"""

from enum import Enum, IntEnum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = Union[int, str]
ProjectKey = NewType("ProjectKey", str)
OwnerKey = NewType("OwnerKey", str)


def project_key(project_id: ProjectId) -> ProjectKey:
    """Stringify a project id the way persisted documents key it."""
    return ProjectKey(str(project_id))


# ─── Enums ───────────────────────────────────────────────────────

class ClaimState(str, Enum):
    """Per (project, slot, user) claim state. No other states exist."""
    UNCLAIMED = "unclaimed"
    CLAIMED = "claimed"


class SlotPriority(IntEnum):
    """Display buckets for ranked slots, lowest sorts first."""
    AVAILABLE = 0
    CLAIMED = 1
    FULL = 2


class StoredDocumentKey(str, Enum):
    """Keys of the documents persisted per owner."""
    LEDGER = "appliedQualifications"
    COUNTER_CACHE = "repositoriesData"
    OWNED_PROJECTS = "myProjects"


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_PROJECT_URL = "#"
MIN_SLOT_TOTAL = 1
