"""Database session manager — error translation and rollback."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, InvalidRequestError, OperationalError,
)

from patient_service.core.errors import DatabaseError
from patient_service.infrastructure.database import (
    DatabaseSessionManager, to_database_error,
)


def test_operational_error_maps_to_execute_failure():
    err = to_database_error(OperationalError("SELECT 1", {}, Exception("down")))
    assert isinstance(err, DatabaseError)
    assert err.operation == "execute"
    assert err.http_status == 500


def test_driver_error_maps_to_query_failure():
    err = to_database_error(DBAPIError("SELECT 1", {}, Exception("bad")))
    assert err.operation == "query"


def test_stray_integrity_error_is_a_storage_failure():
    err = to_database_error(IntegrityError("INSERT", {}, Exception("dup")))
    assert err.code == "DATABASE_ERROR"


def test_other_sqlalchemy_error_maps_to_unknown():
    err = to_database_error(InvalidRequestError("misuse"))
    assert err.operation == "unknown"


@pytest.fixture
async def manager(tmp_path):
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'db.sqlite'}")
    yield m
    await m.dispose()


async def test_session_translates_sqlalchemy_errors(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM patients"))
    assert exc_info.value.operation == "execute"
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test_session_rolls_back_on_domain_error(manager):
    async with manager.session() as db:
        await db.execute(text("CREATE TABLE t (x INTEGER)"))
        await db.commit()

    with pytest.raises(RuntimeError):
        async with manager.session() as db:
            await db.execute(text("INSERT INTO t (x) VALUES (1)"))
            raise RuntimeError("abort")

    async with manager.session() as db:
        count = (await db.execute(text("SELECT COUNT(*) FROM t"))).scalar_one()
    assert count == 0


async def test_health_check(manager):
    assert await manager.health_check() is True
