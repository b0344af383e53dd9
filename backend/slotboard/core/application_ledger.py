"""Application Ledger - per project, the qualification names the current user claims.

Invariants:
    - get() on an unknown project returns an empty set (never raises)
    - set() deduplicates; order of names is irrelevant and not preserved
    - Records are created lazily and never deleted implicitly; an empty claim set is still a record
    - Records for projects missing from the catalog (orphans) are kept until prune()
    - set() swaps in a fresh mapping, so a reader never observes a half-applied update

Design Decisions:
    - Keys are stringified project ids, matching the persisted document layout
    - Document names are sorted on write for deterministic storage
    - from_document() tolerates malformed entries: they are skipped, not fatal
"""

from typing import Any, Iterable

from slotboard.core.domain_types import ProjectId, ProjectKey, project_key


class ApplicationLedger:
    """Source of truth for claim intent."""

    def __init__(self, claims: dict[ProjectKey, frozenset[str]] | None = None):
        self._claims: dict[ProjectKey, frozenset[str]] = dict(claims or {})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicationLedger):
            return NotImplemented
        return self._claims == other._claims

    def __repr__(self) -> str:
        return f"ApplicationLedger({len(self._claims)} records)"

    def get(self, project_id: ProjectId) -> frozenset[str]:
        return self._claims.get(project_key(project_id), frozenset())

    def set(self, project_id: ProjectId, names: Iterable[str]) -> None:
        claims = dict(self._claims)
        claims[project_key(project_id)] = frozenset(names)
        self._claims = claims

    def has_record(self, project_id: ProjectId) -> bool:
        return project_key(project_id) in self._claims

    @property
    def project_keys(self) -> frozenset[ProjectKey]:
        return frozenset(self._claims)

    def copy(self) -> "ApplicationLedger":
        return ApplicationLedger(self._claims)

    def orphaned(self, known_keys: Iterable[ProjectKey]) -> frozenset[ProjectKey]:
        """Record keys whose project is not in known_keys."""
        return frozenset(self._claims) - frozenset(known_keys)

    def pruned(self, known_keys: Iterable[ProjectKey]) -> "ApplicationLedger":
        """New ledger without orphaned records."""
        known = frozenset(known_keys)
        return ApplicationLedger(
            {k: v for k, v in self._claims.items() if k in known},
        )

    def to_document(self) -> dict[str, list[str]]:
        """JSON-safe mapping of stringified project id -> sorted names."""
        return {key: sorted(names) for key, names in self._claims.items()}

    @classmethod
    def from_document(cls, data: Any) -> "ApplicationLedger":
        """Rebuild from a persisted document, deduplicating each record."""
        if not isinstance(data, dict):
            return cls()
        claims: dict[ProjectKey, frozenset[str]] = {}
        for key, names in data.items():
            if not isinstance(names, list):
                continue
            claims[project_key(key)] = frozenset(
                n for n in names if isinstance(n, str)
            )
        return cls(claims)
