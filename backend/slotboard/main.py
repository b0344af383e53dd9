"""SlotBoard API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SlotBoardError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The board is opened once in the lifespan and stored on app.state
    - A catalog LoadError does not stop the process; board routes answer 502

Design Decisions:
    - Lifespan over @app.on_event: one place for startup and cleanup
    - Error handlers registered from api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slotboard.api.error_handlers import register_error_handlers
from slotboard.api.routes import applications, health, my_projects, projects
from slotboard.config import get_settings
from slotboard.core.errors import LoadError
from slotboard.infrastructure.catalog_source import make_catalog_source
from slotboard.infrastructure.database import init_db
from slotboard.infrastructure.document_store import SqlDocumentStore
from slotboard.infrastructure.observability import setup_logging
from slotboard.services.board_loader import open_board
from slotboard.services.board_persistence import BoardPersistence

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()

    store = SqlDocumentStore(manager, settings.board_owner)
    persistence = BoardPersistence(store)
    source = make_catalog_source(
        settings.catalog_source, timeout=settings.catalog_timeout_seconds,
    )
    app.state.persistence = persistence
    app.state.board = None
    app.state.load_error = None
    try:
        app.state.board = await open_board(source, store, persistence)
    except LoadError as e:
        app.state.load_error = e
        logger.error(
            f"Catalog unavailable: {e.message}",
            extra={"error_code": e.code, "source": e.source},
        )
    logger.info("SlotBoard API started", extra={"owner": settings.board_owner})
    yield
    await manager.dispose()
    logger.info("SlotBoard API shutting down")


app = FastAPI(
    title="SlotBoard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(my_projects.router)
app.include_router(applications.router)

register_error_handlers(app)
