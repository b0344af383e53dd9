"""Catalog Source - fetches the external catalog document once per session.

Invariants:
    - http(s) locations are fetched with httpx; anything else is a filesystem path
    - Transport errors, non-2xx responses and invalid JSON all raise LoadError
    - No retry: the caller renders an error state

Design Decisions:
    - fetch() returns raw JSON; record validation happens in the loader (schemas/catalog.py)
    - Optional httpx transport injection lets tests use httpx.MockTransport
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from slotboard.core.errors import LoadError

logger = logging.getLogger(__name__)


class HttpCatalogSource:
    """Loads the catalog document over HTTP."""

    def __init__(
        self, url: str, timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.location = url
        self._timeout = timeout
        self._transport = transport

    async def fetch(self) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport,
            ) as client:
                response = await client.get(self.location)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise LoadError(
                f"HTTP {e.response.status_code} from catalog source", self.location,
            )
        except httpx.HTTPError as e:
            raise LoadError(f"transport error ({type(e).__name__})", self.location)
        except ValueError:
            raise LoadError("catalog document is not valid JSON", self.location)


class FileCatalogSource:
    """Loads the catalog document from a local JSON file."""

    def __init__(self, path: str | Path):
        self.location = str(path)
        self._path = Path(path)

    async def fetch(self) -> Any:
        try:
            return json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise LoadError(f"cannot read file ({e.strerror})", self.location)
        except ValueError:
            raise LoadError("catalog document is not valid JSON", self.location)


def make_catalog_source(
    location: str, timeout: float = 10.0,
) -> HttpCatalogSource | FileCatalogSource:
    """Pick the loader from the location's scheme."""
    if location.startswith(("http://", "https://")):
        return HttpCatalogSource(location, timeout=timeout)
    return FileCatalogSource(location)
