"""Board Loader - startup and recovery sequence for a SlotBoard.

Invariants:
    - The catalog document is fetched exactly once per board; LoadError propagates
    - Loaded counters outside [0, total] are clamped and logged, never raised
    - Duplicate project ids: the first occurrence wins, later ones are logged and dropped
    - Counters are rebuilt from (baseline, ledger); the counter cache is only compared
    - Store read failures degrade to empty documents (logged)

Design Decisions:
    - Owned projects are appended after the external document's projects
    - Ledger claims that no longer fit at baseline are dropped and the ledger
      rewritten, so later releases cannot undercount other users
"""

import logging
from typing import Any

from pydantic import ValidationError

from slotboard.core.application_ledger import ApplicationLedger
from slotboard.core.catalog import Project, ProjectCatalog, dedupe_projects
from slotboard.core.catalog_snapshot import cached_counters, counter_drift
from slotboard.core.domain_types import StoredDocumentKey
from slotboard.core.errors import LoadError, PersistenceError
from slotboard.core.repository_protocols import CatalogSource, DocumentStore
from slotboard.core.slot_board import SlotBoard
from slotboard.schemas.catalog import ProjectRecord, parse_catalog_records
from slotboard.services.board_persistence import BoardPersistence

logger = logging.getLogger(__name__)


def records_to_projects(records: list[ProjectRecord]) -> list[Project]:
    """Convert validated records, logging every clamped counter."""
    projects = []
    for record in records:
        project, violations = record.to_project()
        for v in violations:
            logger.warning(
                f"Clamped slot counter {v['filled']} into [0, {v['total']}]",
                extra={
                    "error_code": v["error_code"],
                    "project_id": v["project_id"],
                    "slot_name": v["slot_name"],
                },
            )
        projects.append(project)
    return projects


async def load_catalog_projects(source: CatalogSource) -> list[Project]:
    """Fetch and validate the external document. Raises LoadError."""
    raw = await source.fetch()
    try:
        records = parse_catalog_records(raw)
    except ValidationError as e:
        raise LoadError(
            f"invalid catalog document ({e.error_count()} errors)", source.location,
        )
    return records_to_projects(records)


async def _read(store: DocumentStore, key: StoredDocumentKey) -> Any | None:
    try:
        return await store.read(key)
    except PersistenceError as e:
        logger.error(
            f"Reading {key.value} failed, starting from empty: {e.message}",
            extra={"error_code": e.code, "store_key": key.value},
        )
        return None


async def read_owned_projects(store: DocumentStore) -> list[Project]:
    raw = await _read(store, StoredDocumentKey.OWNED_PROJECTS)
    if raw is None:
        return []
    try:
        records = parse_catalog_records(raw)
    except ValidationError as e:
        logger.error(
            f"Owned projects document is invalid ({e.error_count()} errors), ignoring it",
            extra={"store_key": StoredDocumentKey.OWNED_PROJECTS.value},
        )
        return []
    return records_to_projects(records)


def build_baseline(
    external: list[Project], owned: list[Project],
) -> tuple[ProjectCatalog, frozenset]:
    """Merge external and owned projects. Returns (baseline, owned keys kept)."""
    projects, dropped = dedupe_projects([*external, *owned])
    for key in dropped:
        logger.warning(
            f"Duplicate project id {key}, keeping the first occurrence",
            extra={"error_code": "DUPLICATE_PROJECT_ID", "project_id": key},
        )
    owned_ids = {id(p) for p in owned}
    owned_keys = frozenset(p.key for p in projects if id(p) in owned_ids)
    return ProjectCatalog(projects), owned_keys


async def open_board(
    source: CatalogSource, store: DocumentStore, persistence: BoardPersistence,
) -> SlotBoard:
    """Load, recompute and persist a fresh board. Raises LoadError."""
    external = await load_catalog_projects(source)
    owned = await read_owned_projects(store)
    baseline, owned_keys = build_baseline(external, owned)

    ledger = ApplicationLedger.from_document(
        await _read(store, StoredDocumentKey.LEDGER),
    )
    board, result = SlotBoard.from_baseline(baseline, ledger, owned_keys)

    for key, names in result.dropped.items():
        logger.warning(
            f"Dropped claims that no longer fit: {sorted(names)}",
            extra={"project_id": key},
        )
    if result.dropped:
        await persistence.save_ledger(board)

    cached = cached_counters(await _read(store, StoredDocumentKey.COUNTER_CACHE))
    for d in counter_drift(board.catalog, cached):
        logger.warning(
            f"Counter cache drift: cached {d['cached']}, recomputed {d['recomputed']}",
            extra={"project_id": d["project_id"], "slot_name": d["slot_name"]},
        )
    await persistence.save_counters(board)

    if board.orphaned_keys:
        logger.info(
            "Ledger holds records for projects missing from the catalog",
            extra={"count": len(board.orphaned_keys)},
        )
    logger.info(
        f"Catalog loaded from {source.location}",
        extra={"count": len(baseline), "source": source.location},
    )
    return board
