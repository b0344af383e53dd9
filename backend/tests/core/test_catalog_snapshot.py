"""Catalog Snapshot tests - counter cache serialization and drift detection."""

from slotboard.core.catalog import Project, ProjectCatalog, QualificationSlot
from slotboard.core.catalog_snapshot import (
    cached_counters, counter_drift, projects_to_snapshot,
)


def _catalog():
    return ProjectCatalog([
        Project(
            id=1, name="p1", owner="o", tags=("a",),
            qualifications=(QualificationSlot("A", 1, 2), QualificationSlot("B", 0, 1)),
        ),
        Project(id="x", name="px", owner="o"),
    ])


def test_snapshot_matches_input_document_shape():
    snapshot = projects_to_snapshot(_catalog())
    assert snapshot[0] == {
        "id": 1,
        "name": "p1",
        "owner": "o",
        "description": "",
        "url": "#",
        "tags": ["a"],
        "qualifications": [
            {"name": "A", "filled": 1, "total": 2},
            {"name": "B", "filled": 0, "total": 1},
        ],
    }
    assert snapshot[1]["id"] == "x"


def test_cached_counters_reads_snapshot():
    counters = cached_counters(projects_to_snapshot(_catalog()))
    assert counters == {("1", "A"): 1, ("1", "B"): 0}


def test_cached_counters_skips_malformed_entries():
    data = [
        "junk",
        {"name": "no id"},
        {"id": 2, "qualifications": [{"name": "A", "filled": "3"}, 5]},
        {"id": 3, "qualifications": None},
    ]
    assert cached_counters(data) == {}
    assert cached_counters({"not": "a list"}) == {}


def test_no_drift_when_cache_matches():
    catalog = _catalog()
    assert counter_drift(catalog, cached_counters(projects_to_snapshot(catalog))) == []


def test_drift_reports_differing_counters():
    drift = counter_drift(_catalog(), {("1", "A"): 2, ("1", "Gone"): 4})
    assert drift == [
        {"project_id": "1", "slot_name": "A", "cached": 2, "recomputed": 1},
    ]
