"""Root conftest - shared test configuration."""

import os

# Keep tests off any developer database or catalog document
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CATALOG_SOURCE", "tests/missing-catalog.json")
os.environ.setdefault("LOG_FORMAT", "text")
