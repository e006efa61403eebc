"""Service test fixtures — async DB, store/engine wiring, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
    - get_db dependency overridden to use the test engine
    - db_manager patched so readiness probes see the test database

Design Decisions:
    - SQLite in-memory + StaticPool: one shared connection, so every session in a
      test sees the same database
    - Engine-level tests use `engine`/`employees` on a single session; route tests
      go through `client` only
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from org_structure.db.base import Base
import org_structure.models  # noqa: F401
from org_structure.infrastructure.database import (
    get_db, DatabaseSessionManager, enable_sqlite_foreign_keys,
)
import org_structure.infrastructure.database as db_module
from org_structure.main import app
from org_structure.services.department_store import DepartmentStore
from org_structure.services.employee_attachment import EmployeeAttachment
from org_structure.services.hierarchy_engine import HierarchyEngine


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
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
def store(test_db):
    return DepartmentStore(test_db)


@pytest.fixture
def employees(store):
    return EmployeeAttachment(store)


@pytest.fixture
def engine(store, employees):
    return HierarchyEngine(store, employees)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
