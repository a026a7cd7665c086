"""Service test fixtures — async DB, FastAPI test client, in-memory repository.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager replaced so readiness probes hit the test engine
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from patient_service.db.base import Base
from patient_service.infrastructure.database import get_db, DatabaseSessionManager
from patient_service.infrastructure.patient_repository import SqlAlchemyPatientRepository
from patient_service.services.patient_service import PatientService
import patient_service.infrastructure.database as db_module
import patient_service.models  # noqa: F401
from patient_service.main import app
from tests.services.fake_patient_repository import InMemoryPatientRepository


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
def sql_repository(test_db):
    return SqlAlchemyPatientRepository(test_db)


@pytest.fixture
def fake_repository():
    return InMemoryPatientRepository()


@pytest.fixture
def service(fake_repository):
    return PatientService(fake_repository)


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
