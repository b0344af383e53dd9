"""In-memory DocumentStore fakes for persistence and loader tests.

Invariants:
    - writes records every attempted key in order, failed or not
    - Failures raise PersistenceError, the same type the SQL store raises
"""

from typing import Any

from slotboard.core.domain_types import StoredDocumentKey
from slotboard.core.errors import PersistenceError


class RecordingStore:
    """DocumentStore that keeps documents in a dict and can be told to fail."""

    def __init__(
        self, documents: dict[str, Any] | None = None,
        fail_reads: bool = False, fail_writes: frozenset[str] | bool = False,
    ):
        self.documents: dict[str, Any] = dict(documents or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes: list[str] = []

    def _write_fails(self, key: str) -> bool:
        if isinstance(self.fail_writes, bool):
            return self.fail_writes
        return key in self.fail_writes

    async def read(self, key: StoredDocumentKey) -> Any | None:
        if self.fail_reads:
            raise PersistenceError("Connection or operational error", "execute")
        return self.documents.get(key.value)

    async def write(self, key: StoredDocumentKey, payload: Any) -> None:
        self.writes.append(key.value)
        if self._write_fails(key.value):
            raise PersistenceError("Connection or operational error", "execute")
        self.documents[key.value] = payload
