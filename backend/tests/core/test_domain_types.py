"""Domain Types - verifies rich type definitions and enum values.

Tests:
    - project_key stringifies ids
    - ClaimState has exactly 2 members (no other states exist)
    - SlotPriority orders available < claimed < full
    - Stored document keys match the persisted layout
"""

from slotboard.core.domain_types import (
    ClaimState, SlotPriority, StoredDocumentKey, project_key,
)


def test_project_key_stringifies_ids():
    assert project_key(12) == "12"
    assert project_key("12") == "12"
    assert project_key("abc") == "abc"


def test_claim_state_has_two_states():
    assert set(ClaimState) == {ClaimState.UNCLAIMED, ClaimState.CLAIMED}


def test_claim_state_serializes_to_string():
    assert ClaimState.CLAIMED.value == "claimed"
    assert ClaimState("unclaimed") is ClaimState.UNCLAIMED


def test_slot_priority_order():
    assert SlotPriority.AVAILABLE < SlotPriority.CLAIMED < SlotPriority.FULL
    assert int(SlotPriority.FULL) == 2


def test_stored_document_keys():
    assert StoredDocumentKey.LEDGER.value == "appliedQualifications"
    assert StoredDocumentKey.COUNTER_CACHE.value == "repositoriesData"
    assert StoredDocumentKey.OWNED_PROJECTS.value == "myProjects"
