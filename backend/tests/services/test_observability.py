"""Structured logging - JSON formatter surfaces the board's extra fields."""

import json
import logging

from slotboard.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "slotboard.test", logging.WARNING, __file__, 1, "Clamped %s", ("slot",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "slotboard.test"
    assert out["message"] == "Clamped slot"
    assert "timestamp" in out


def test_json_formatter_includes_extras_when_present():
    out = json.loads(JSONFormatter().format(
        _record(project_id="1", slot_name="Backend", error_code="INVARIANT_VIOLATION"),
    ))
    assert out["project_id"] == "1"
    assert out["slot_name"] == "Backend"
    assert out["error_code"] == "INVARIANT_VIOLATION"
    assert "store_key" not in out


def test_json_formatter_includes_source_and_count():
    out = json.loads(JSONFormatter().format(_record(source="data/projects.json", count=3)))
    assert out["source"] == "data/projects.json"
    assert out["count"] == 3
