"""Catalog Snapshot - serialization of catalogs for the persisted counter cache.

Invariants:
    - projects_to_snapshot produces the input document shape (JSON-safe, ordered)
    - cached_counters never raises: malformed entries are skipped
    - counter_drift compares by (project key, slot name) only

Design Decisions:
    - The counter cache is written but only read back for drift reporting;
      counters are always rebuilt from the ledger
    - Parsing snapshots back into Projects is the schema layer's job (validation)
"""

from typing import Any, Iterable

from slotboard.core.catalog import Project, ProjectCatalog
from slotboard.core.domain_types import ProjectKey, project_key


def project_to_snapshot(project: Project) -> dict:
    return {
        "id": project.id,
        "name": project.name,
        "owner": project.owner,
        "description": project.description,
        "url": project.url,
        "tags": list(project.tags),
        "qualifications": [
            {"name": q.name, "filled": q.filled, "total": q.total}
            for q in project.qualifications
        ],
    }


def projects_to_snapshot(projects: Iterable[Project]) -> list[dict]:
    """Serialize projects to a JSON-safe list. Pure, no IO."""
    return [project_to_snapshot(p) for p in projects]


def cached_counters(data: Any) -> dict[tuple[ProjectKey, str], int]:
    """Extract (project key, slot name) -> filled from a cached snapshot."""
    counters: dict[tuple[ProjectKey, str], int] = {}
    if not isinstance(data, list):
        return counters
    for record in data:
        if not isinstance(record, dict) or "id" not in record:
            continue
        key = project_key(record["id"])
        for q in record.get("qualifications") or []:
            if isinstance(q, dict) and isinstance(q.get("filled"), int):
                counters[(key, str(q.get("name")))] = q["filled"]
    return counters


def counter_drift(
    catalog: ProjectCatalog, cached: dict[tuple[ProjectKey, str], int],
) -> list[dict]:
    """Slots whose cached counter differs from the catalog's counter."""
    drift = []
    for project in catalog:
        for q in project.qualifications:
            cached_value = cached.get((project.key, q.name))
            if cached_value is not None and cached_value != q.filled:
                drift.append({
                    "project_id": project.key,
                    "slot_name": q.name,
                    "cached": cached_value,
                    "recomputed": q.filled,
                })
    return drift
