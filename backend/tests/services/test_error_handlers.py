"""Error handlers - REST envelopes for domain, validation and unexpected errors."""

import json

from starlette.requests import Request

from slotboard.api.error_handlers import handle_unexpected_error


def _request(path="/api/v1/projects"):
    return Request({
        "type": "http", "method": "GET", "path": path,
        "query_string": b"", "headers": [],
    })


async def test_validation_envelope_lists_fields(client):
    res = await client.post("/api/v1/my-projects", json={"owner": "me"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["category"] == "validation"
    assert error["severity"] == "error"
    fields = {d["field"] for d in error["details"]}
    assert "body.name" in fields
    assert "body.qualifications" in fields


async def test_domain_error_envelope(client):
    res = await client.get("/api/v1/projects/404")
    error = res.json()["error"]
    assert error["category"] == "resource_not_found"
    assert error["context"]["project_id"] == "404"


async def test_unexpected_error_hides_details():
    res = await handle_unexpected_error(_request(), RuntimeError("secret dsn"))
    assert res.status_code == 500
    body = json.loads(res.body)
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert body["error"]["severity"] == "critical"
    assert "secret" not in res.body.decode()
