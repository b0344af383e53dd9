"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, while the core functions that
      consume their results stay synchronous
"""

from typing import Any, Protocol

from slotboard.core.domain_types import StoredDocumentKey


class CatalogSource(Protocol):
    """Contract for fetching the external catalog document."""
    location: str

    async def fetch(self) -> Any: ...


class DocumentStore(Protocol):
    """Contract for per-owner persisted documents (ledger, counter cache, owned projects)."""
    async def read(self, key: StoredDocumentKey) -> Any | None: ...
    async def write(self, key: StoredDocumentKey, payload: Any) -> None: ...
