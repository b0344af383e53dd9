"""Service test fixtures - async DB, document store, board and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager patched so the readiness probe sees the test database
    - app.state.board/persistence installed per test and restored afterwards

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - ASGITransport does not run the lifespan, so the client fixture installs
      the board the lifespan would have opened
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import slotboard.models  # noqa: F401
from slotboard.core.catalog import Project, ProjectCatalog, QualificationSlot
from slotboard.core.slot_board import SlotBoard
from slotboard.db.base import Base
from slotboard.infrastructure.database import DatabaseSessionManager
from slotboard.infrastructure.document_store import SqlDocumentStore
from slotboard.services.board_persistence import BoardPersistence
import slotboard.infrastructure.database as db_module
from slotboard.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def document_store(fake_manager):
    return SqlDocumentStore(fake_manager, "tester")


@pytest.fixture
def persistence(document_store):
    return BoardPersistence(document_store)


def _sample_baseline() -> ProjectCatalog:
    return ProjectCatalog([
        Project(
            id=1, name="Slot Board", owner="ana",
            description="Volunteer matching", tags=("python", "web"),
            qualifications=(
                QualificationSlot("Backend", 1, 2),
                QualificationSlot("Frontend", 1, 2),
                QualificationSlot("Designer", 1, 1),
            ),
        ),
        Project(
            id=2, name="Data Hub", owner="bruno",
            qualifications=(
                QualificationSlot("Data Engineer", 0, 3),
            ),
        ),
        Project(
            id=10, name="Mine", owner="tester",
            qualifications=(QualificationSlot("Writer", 0, 2),),
        ),
    ])


@pytest.fixture
def board():
    """Board with two external projects and one owned project (id 10)."""
    return SlotBoard(_sample_baseline(), owned_keys={"10"})


@pytest.fixture
async def client(board, persistence, fake_manager):
    """FastAPI test client serving the board fixture."""
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager
    app.state.board = board
    app.state.persistence = persistence
    app.state.load_error = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.board = None
    app.state.persistence = None
    app.state.load_error = None
    db_module.db_manager = original_manager
