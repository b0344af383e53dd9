"""My-projects routes - create, edit and delete owned projects over HTTP."""

from slotboard.core.domain_types import StoredDocumentKey

DRAFT = {
    "name": "Docs Sprint",
    "owner": "tester",
    "description": "Write the guides",
    "tags": "docs, writing",
    "qualifications": [{"name": "Writer", "total": 3}, {"name": "Reviewer", "total": 1}],
}


async def test_list_owned_projects(client):
    res = await client.get("/api/v1/my-projects")
    assert res.status_code == 200
    assert [p["id"] for p in res.json()["projects"]] == [10]
    assert set(res.json()) == {"projects"}
    assert res.json()["projects"][0]["slots"][0]["name"] == "Writer"


async def test_create_project(client, board, document_store):
    res = await client.post("/api/v1/my-projects", json=DRAFT)
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 11
    assert body["tags"] == ["docs", "writing"]
    assert body["url"] == "#"
    assert all(s["filled"] == 0 for s in body["slots"])
    assert "11" in board.owned_keys

    owned = await document_store.read(StoredDocumentKey.OWNED_PROJECTS)
    assert [p["id"] for p in owned] == [10, 11]


async def test_created_project_is_claimable(client):
    await client.post("/api/v1/my-projects", json=DRAFT)
    res = await client.put("/api/v1/projects/11/claims", json={"names": ["Reviewer"]})
    assert res.json()["effective_claims"] == ["Reviewer"]


async def test_create_without_qualifications_is_400(client):
    res = await client.post("/api/v1/my-projects", json={**DRAFT, "qualifications": []})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_edit_owned_project(client):
    await client.put("/api/v1/projects/10/claims", json={"names": ["Writer"]})
    res = await client.put(
        "/api/v1/my-projects/10",
        json={**DRAFT, "qualifications": [{"name": "Writer", "total": 5}]},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Docs Sprint"
    assert body["slots"] == [{
        "name": "Writer", "filled": 1, "total": 5,
        "is_full": False, "is_claimed": True, "priority": 1,
    }]


async def test_edit_external_project_is_404(client):
    res = await client.put("/api/v1/my-projects/1", json=DRAFT)
    assert res.status_code == 404


async def test_delete_owned_project_orphans_claims(client, board):
    await client.put("/api/v1/projects/10/claims", json={"names": ["Writer"]})
    res = await client.delete("/api/v1/my-projects/10")
    assert res.status_code == 204
    assert (await client.get("/api/v1/projects/10")).status_code == 404
    assert board.ledger.get(10) == {"Writer"}


async def test_delete_external_project_is_404(client):
    res = await client.delete("/api/v1/my-projects/2")
    assert res.status_code == 404


async def test_recreate_after_delete_gets_fresh_id(client):
    await client.put("/api/v1/projects/10/claims", json={"names": ["Writer"]})
    await client.delete("/api/v1/my-projects/10")
    res = await client.post("/api/v1/my-projects", json=DRAFT)
    assert res.json()["id"] == 11
    assert res.json()["claim_state"]["has_any_claim"] is False


async def test_edit_persists_trimmed_ledger(client, document_store):
    await client.put("/api/v1/projects/10/claims", json={"names": ["Writer"]})
    res = await client.put(
        "/api/v1/my-projects/10",
        json={**DRAFT, "qualifications": [{"name": "Editor", "total": 2}]},
    )
    assert res.json()["claim_state"]["has_any_claim"] is False
    assert await document_store.read(StoredDocumentKey.LEDGER) == {"10": []}
