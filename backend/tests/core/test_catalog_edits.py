"""Catalog Edits tests - create, edit and remove owned projects."""

import pytest

from slotboard.core.catalog import Project, ProjectCatalog, QualificationSlot
from slotboard.core.catalog_edits import (
    ProjectDraft, create_project, edit_project, merge_slots, remove_project,
)
from slotboard.core.errors import ProjectNotFoundError


def _catalog():
    return ProjectCatalog([
        Project(
            id=4, name="Old", owner="me",
            qualifications=(
                QualificationSlot("Backend", 2, 3),
                QualificationSlot("QA", 1, 1),
            ),
        ),
        Project(id="ext", name="External", owner="them"),
    ])


def _draft(*quals, name="New"):
    return ProjectDraft(name=name, owner="me", qualifications=tuple(quals))


def test_create_assigns_next_integer_id():
    catalog, project = create_project(_catalog(), _draft(("Writer", 2)))
    assert project.id == 5
    assert catalog.get(5) is project
    assert [p.key for p in catalog] == ["4", "ext", "5"]


def test_create_starts_every_slot_empty():
    _, project = create_project(_catalog(), _draft(("A", 2), ("B", 1)))
    assert [q.filled for q in project.qualifications] == [0, 0]


def test_create_defaults_blank_url():
    draft = ProjectDraft(name="n", owner="o", url="", qualifications=(("A", 1),))
    _, project = create_project(ProjectCatalog(), draft)
    assert project.url == "#"
    assert project.id == 1


def test_edit_keeps_filled_for_surviving_names():
    catalog, project = edit_project(
        _catalog(), 4, _draft(("Backend", 5), ("Design", 2), name="Renamed"),
    )
    by_name = {q.name: q for q in project.qualifications}
    assert by_name["Backend"].filled == 2
    assert by_name["Design"].filled == 0
    assert "QA" not in by_name
    assert project.name == "Renamed"
    assert catalog.get(4) is project


def test_edit_clamps_filled_to_new_total():
    _, project = edit_project(_catalog(), 4, _draft(("Backend", 1)))
    assert project.qualifications[0].filled == 1


def test_edit_unknown_project_raises():
    with pytest.raises(ProjectNotFoundError):
        edit_project(_catalog(), 99, _draft(("A", 1)))


def test_remove_project():
    catalog = remove_project(_catalog(), "4")
    assert catalog.keys == {"ext"}


def test_remove_unknown_project_raises():
    with pytest.raises(ProjectNotFoundError):
        remove_project(_catalog(), 99)


def test_merge_slots_keeps_draft_order():
    previous = (QualificationSlot("A", 1, 1), QualificationSlot("B", 0, 1))
    merged = merge_slots(previous, (("B", 2), ("A", 3)))
    assert [(q.name, q.filled, q.total) for q in merged] == [("B", 0, 2), ("A", 1, 3)]


def test_create_skips_reserved_ledger_keys():
    _, project = create_project(_catalog(), _draft(("A", 1)), reserved_keys={"12"})
    assert project.id == 13
