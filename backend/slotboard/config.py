"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service runs with a local SQLite file out of the box
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - catalog_source is a URL or a filesystem path; the scheme picks the loader
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database (persisted ledger, counter cache, owned projects)
    database_url: str = "sqlite+aiosqlite:///./slotboard.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql://, asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 5
    database_auto_create: bool = True

    # Catalog document
    catalog_source: str = "data/projects.json"
    catalog_timeout_seconds: float = 10.0

    # Board
    board_owner: str = "local"
    max_cards: int | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
