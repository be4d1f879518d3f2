"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - app.state.db replaced so the readiness probe hits the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - PRAGMA foreign_keys=ON on every connection so workerId/courseId
      references are enforced as they are on PostgreSQL
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from certtrack.db.base import Base
from certtrack.infrastructure.database import DatabaseSessionManager, get_db
from certtrack.main import app
from certtrack.models import Certification, Course, Worker
from certtrack.services.store import CertificationStore


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
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
    return CertificationStore(test_db)


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = app.state.db
    app.state.db = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db = original_manager


@pytest.fixture
async def seed_worker(test_db):
    """Insert a worker directly into the test DB."""
    worker = Worker(name="Jane Doe", email="jane@example.com")
    test_db.add(worker)
    await test_db.commit()
    await test_db.refresh(worker)
    return worker


@pytest.fixture
async def seed_course(test_db):
    course = Course(name="Working at Heights", is_active=True)
    test_db.add(course)
    await test_db.commit()
    await test_db.refresh(course)
    return course


@pytest.fixture
def make_certification(test_db):
    """Factory: insert a certification for a worker with a given expiry offset in days."""
    counter = {"n": 0}

    async def _make(worker_id: int, expires_in_days: float | None, **fields):
        counter["n"] += 1
        now = datetime.now(timezone.utc)
        cert = Certification(
            worker_id=worker_id,
            name=fields.pop("name", "First Aid"),
            certificate_number=fields.pop(
                "certificate_number", f"FA-{counter['n']:04d}",
            ),
            issued_date=now - timedelta(days=365),
            expiry_date=(
                None if expires_in_days is None
                else now + timedelta(days=expires_in_days)
            ),
            **fields,
        )
        test_db.add(cert)
        await test_db.commit()
        await test_db.refresh(cert)
        return cert

    return _make
